from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


# Calculation modes (exactly one per request)

@dataclass(frozen=True)
class ByDayCount:
    days: int


@dataclass(frozen=True)
class ByDateRange:
    start: date
    end: date  # inclusive


VacationMode = Union[ByDayCount, ByDateRange]


# POST /calculate body.
# Fields stay as text so bad input gets the same messages as the query string.
class VacationPayInput(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    averageSalary: Optional[str] = None
    numberOfDays: Optional[str] = None
    startDate: Optional[str] = None  # dd-mm-yy
    endDate: Optional[str] = None    # dd-mm-yy
