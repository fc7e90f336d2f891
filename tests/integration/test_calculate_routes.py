"""
Integration tests for /calculate through the FastAPI app
"""

import pytest

from utils.validator import MAXIMUM_DAYS, MAXIMUM_SALARY

pytestmark = pytest.mark.integration

SALARY = "293000"
NO_HOLIDAY_START = "07-04-25"
NO_HOLIDAY_END = "13-04-25"  # 7 days
MAY_START = "28-04-25"
MAY_END = "11-05-25"  # 14 days, May 1 and May 9 are holidays


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.json()


def test_calculate_by_days(client):
    resp = client.get("/calculate", params={"averageSalary": SALARY, "numberOfDays": "7"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == 70000


def test_calculate_by_dates_without_holidays(client):
    resp = client.get(
        "/calculate",
        params={"averageSalary": SALARY, "startDate": NO_HOLIDAY_START, "endDate": NO_HOLIDAY_END},
    )
    assert resp.status_code == 200
    assert resp.json() == 70000


def test_calculate_by_dates_with_holidays(client):
    resp = client.get(
        "/calculate",
        params={"averageSalary": SALARY, "startDate": MAY_START, "endDate": MAY_END},
    )
    assert resp.status_code == 200
    assert resp.json() == 120000


def test_calculate_new_year_holidays_only(client):
    resp = client.get(
        "/calculate",
        params={"averageSalary": SALARY, "startDate": "01-01-25", "endDate": "08-01-25"},
    )
    assert resp.status_code == 200
    assert resp.json() == 0


@pytest.mark.parametrize(
    "params, expected_message",
    [
        ({"numberOfDays": "7"}, "Required parameter averageSalary is missing"),
        ({"averageSalary": "not-a-number", "numberOfDays": "7"}, "averageSalary must be an integer"),
        (
            {"averageSalary": str(MAXIMUM_SALARY + 1), "numberOfDays": "7"},
            "Average salary (averageSalary) must be between",
        ),
        ({"averageSalary": SALARY}, "You must specify EITHER numberOfDays OR both startDate and endDate"),
        (
            {"averageSalary": SALARY, "startDate": NO_HOLIDAY_START},
            "You must specify EITHER numberOfDays OR both startDate and endDate",
        ),
        (
            {
                "averageSalary": SALARY,
                "numberOfDays": "7",
                "startDate": NO_HOLIDAY_START,
                "endDate": NO_HOLIDAY_END,
            },
            "but not all together",
        ),
        ({"averageSalary": SALARY, "numberOfDays": "ten"}, "numberOfDays must be an integer"),
        (
            {"averageSalary": SALARY, "numberOfDays": str(MAXIMUM_DAYS + 1)},
            "Number of vacation days (numberOfDays) must be between",
        ),
        (
            {"averageSalary": SALARY, "startDate": "01.04.2024", "endDate": NO_HOLIDAY_END},
            "Invalid format of the vacation start date (startDate)",
        ),
        (
            {"averageSalary": SALARY, "startDate": NO_HOLIDAY_START, "endDate": "2024/04/14"},
            "Invalid format of the vacation end date (endDate)",
        ),
        (
            {"averageSalary": SALARY, "startDate": NO_HOLIDAY_END, "endDate": NO_HOLIDAY_START},
            "Invalid vacation period",
        ),
    ],
)
def test_calculate_bad_request(client, params, expected_message):
    resp = client.get("/calculate", params=params)
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert expected_message in resp.text


def test_post_calculate_by_days(client):
    resp = client.post("/calculate", json={"averageSalary": "100000", "numberOfDays": "14"})
    assert resp.status_code == 200
    assert resp.json() == 47782


def test_post_calculate_accepts_numbers(client):
    resp = client.post("/calculate", json={"averageSalary": 150000, "numberOfDays": 7})
    assert resp.status_code == 200
    assert resp.json() == 35837


def test_post_calculate_by_dates(client):
    resp = client.post(
        "/calculate",
        json={"averageSalary": SALARY, "startDate": MAY_START, "endDate": MAY_END},
    )
    assert resp.status_code == 200
    assert resp.json() == 120000


def test_post_calculate_bad_request(client):
    resp = client.post("/calculate", json={"averageSalary": SALARY, "numberOfDays": "7", "endDate": MAY_END})
    assert resp.status_code == 400
    assert "but not all together" in resp.text


def test_post_calculate_very_long_salary(client):
    resp = client.post("/calculate", json={"averageSalary": "1" * 5000, "numberOfDays": "7"})
    assert resp.status_code == 400
    assert "averageSalary must be an integer" in resp.text


def test_get_calculate_very_long_days(client):
    resp = client.get("/calculate", params={"averageSalary": SALARY, "numberOfDays": "9" * 5000})
    assert resp.status_code == 400
    assert "numberOfDays must be an integer" in resp.text


def test_calculate_end_of_february_overflow(client):
    # 30-02-25 is read as 28-02-25: Feb 23 is a holiday, so 5 of 6 days are paid
    resp = client.get(
        "/calculate",
        params={"averageSalary": SALARY, "startDate": "23-02-25", "endDate": "30-02-25"},
    )
    assert resp.status_code == 200
    assert resp.json() == 50000
