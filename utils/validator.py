"""
Input validation and calculation-mode dispatch.

Raw request values arrive as text. They are checked in a fixed order:
salary presence, salary format, salary range, mode dispatch, then the format
and range of the fields that belong to the chosen mode. The first failure
raises a VacationPayError subclass whose message goes back to the client.
"""

import calendar
import re
from datetime import date
from typing import Optional, Tuple

from schemas import ByDateRange, ByDayCount, VacationMode
from utils.errors import (
    AmbiguousOrMissingMode,
    DaysOutOfRange,
    InvalidDateOrder,
    MissingRequiredField,
    NotADate,
    NotANumber,
    SalaryOutOfRange,
)

MINIMUM_SALARY = 100  # subunits
MAXIMUM_SALARY = 100_000_000_000_000  # subunits
MINIMUM_DAYS = 1
MAXIMUM_DAYS = 366
DATE_FORMAT = "dd-MM-yy"

# Salaries are signed 64-bit values and day counts signed 32-bit values;
# anything wider is reported as not a number rather than out of range.
_SALARY_LIMIT = 2 ** 63
_DAYS_LIMIT = 2 ** 31

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DATE_RE = re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{2})")


def is_valid_salary(average_salary: int) -> bool:
    return MINIMUM_SALARY <= average_salary <= MAXIMUM_SALARY


def is_valid_days(days: int) -> bool:
    return MINIMUM_DAYS <= days <= MAXIMUM_DAYS


def is_valid_date_range(start: date, end: date) -> bool:
    """
    The end date must not precede the start date, and the inclusive length of
    the period must itself be a valid number of days. Holidays count towards
    the length even though they are not paid.
    """
    if start > end:
        return False
    days_in_period = (end - start).days + 1
    return is_valid_days(days_in_period)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _parse_int(raw: str, limit: int) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(raw):
        return None
    # more than 19 significant digits never fits in 64 bits
    if len(raw.lstrip("+-").lstrip("0")) > 19:
        return None
    value = int(raw)
    if not -limit <= value < limit:
        return None
    return value


def parse_salary(raw: Optional[str]) -> int:
    if _is_blank(raw):
        raise MissingRequiredField("Required parameter averageSalary is missing.")

    average_salary = _parse_int(raw, _SALARY_LIMIT)
    if average_salary is None:
        raise NotANumber("Parameter averageSalary must be an integer (number of subunits).")

    if not is_valid_salary(average_salary):
        raise SalaryOutOfRange(
            f"Average salary (averageSalary) must be between {MINIMUM_SALARY} and {MAXIMUM_SALARY} subunits. "
            f"You entered {average_salary} subunits."
        )
    return average_salary


def parse_days(raw: str) -> int:
    days = _parse_int(raw, _DAYS_LIMIT)
    if days is None:
        raise NotANumber("Parameter numberOfDays must be an integer.")

    if not is_valid_days(days):
        raise DaysOutOfRange(
            f"Number of vacation days (numberOfDays) must be between {MINIMUM_DAYS} and {MAXIMUM_DAYS}. "
            f"You entered {days} days."
        )
    return days


def parse_date(raw: str, description: str) -> date:
    """
    Parse a dd-mm-yy date. Two-digit years fall in 2000-2099.
    A day past the end of the month is moved back to the month's last day.
    `description` names the field in the error message, e.g. "start date (startDate)".
    """
    match = _DATE_RE.fullmatch(raw)
    if match is not None:
        day, month, year = (int(part) for part in match.groups())
        if 1 <= month <= 12 and 1 <= day <= 31:
            # 30-02-25 becomes 28-02-25
            last_day = calendar.monthrange(2000 + year, month)[1]
            return date(2000 + year, month, min(day, last_day))
    raise NotADate(
        f"Invalid format of the vacation {description}. Expected format {DATE_FORMAT.lower()}."
    )


def resolve_mode(
    number_of_days: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
) -> VacationMode:
    """
    Pick the calculation mode from the raw optional fields, then parse and
    range-check only the fields of that mode.

    numberOfDays alone selects ByDayCount, startDate and endDate together select
    ByDateRange. Any other combination is rejected before anything is parsed.
    """
    has_days = not _is_blank(number_of_days)
    has_start = not _is_blank(start_date)
    has_end = not _is_blank(end_date)

    if has_days and (has_start or has_end):
        raise AmbiguousOrMissingMode(
            "Specify EITHER numberOfDays OR both startDate and endDate, but not all together."
        )
    if not has_days and not (has_start and has_end):
        raise AmbiguousOrMissingMode(
            "You must specify EITHER numberOfDays OR both startDate and endDate."
        )

    if has_days:
        return ByDayCount(days=parse_days(number_of_days))

    start = parse_date(start_date, "start date (startDate)")
    end = parse_date(end_date, "end date (endDate)")
    if not is_valid_date_range(start, end):
        raise InvalidDateOrder(
            "Invalid vacation period: the end date must not precede the start date, "
            f"and the duration must be between {MINIMUM_DAYS} and {MAXIMUM_DAYS} days."
        )
    return ByDateRange(start=start, end=end)


def validate_request(
    average_salary: Optional[str],
    number_of_days: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Tuple[int, VacationMode]:
    salary = parse_salary(average_salary)
    mode = resolve_mode(number_of_days, start_date, end_date)
    return salary, mode
