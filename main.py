import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from schemas import VacationPayInput
from utils.calculator import calculate_vacation_pay
from utils.config import settings
from utils.errors import VacationPayError
from utils.log_config import setup_logging
from utils.validator import validate_request

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Vacation Pay API")

# CORS (origins come from CORS_ALLOW_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every validation failure becomes a 400 with a plain-text message
@app.exception_handler(VacationPayError)
async def vacation_pay_error_handler(request: Request, exc: VacationPayError):
    logger.info("rejected %s %s | %s | %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return PlainTextResponse(exc.message, status_code=400)


# Root router
@app.get("/")
def root():
    return {"message": "Vacation Pay API is running"}


def _calculate(
    average_salary: Optional[str],
    number_of_days: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
) -> int:
    salary, mode = validate_request(average_salary, number_of_days, start_date, end_date)
    return calculate_vacation_pay(salary, mode)


# Vacation pay API (query string - GET)
@app.get("/calculate")
def calculate(
    averageSalary: Optional[str] = Query(None, description="Average monthly salary in subunits (e.g. 293000)"),
    numberOfDays: Optional[str] = Query(None, description="Number of vacation days (1-366)"),
    startDate: Optional[str] = Query(None, description="First vacation day, dd-mm-yy (e.g. 28-04-25)"),
    endDate: Optional[str] = Query(None, description="Last vacation day, dd-mm-yy (e.g. 11-05-25)"),
) -> int:
    """
    Vacation pay in subunits, rounded up.
    Give EITHER numberOfDays OR both startDate and endDate.
    """
    return _calculate(averageSalary, numberOfDays, startDate, endDate)


# Vacation pay API (JSON body - POST)
@app.post("/calculate")
def calculate_from_body(input: VacationPayInput) -> int:
    """
    Same calculation as GET /calculate, with the parameters sent as a JSON body
    """
    return _calculate(input.averageSalary, input.numberOfDays, input.startDate, input.endDate)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
