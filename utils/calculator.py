#step1. import

"""Summary:
math.ceil → payouts are always rounded up to the next subunit
logging → the calculated amount is logged at DEBUG level"""

import logging
import math
from datetime import date

from schemas import ByDateRange, ByDayCount, VacationMode
from utils.holidays import count_holidays

logger = logging.getLogger(__name__)

# Statutory average number of calendar days in a month
AVERAGE_DAYS_IN_MONTH = 29.3



#step2. Vacation pay by number of days

"""Summary:
→ daily rate = average monthly salary / 29.3 (float division, not integer division)
→ vacation pay = daily rate × days, rounded up
Inputs are expected to be validated already; nothing is checked here."""

def pay_by_days(average_salary: int, days: int) -> int:
    daily_rate = average_salary / AVERAGE_DAYS_IN_MONTH
    return math.ceil(daily_rate * days)



#step3. Vacation pay by date range

"""Summary:
→ counts holidays between start and end (both inclusive)
→ paid days = calendar days - holidays
→ a period made only of holidays pays 0
Requires start <= end; the validator guarantees this."""

def pay_by_date_range(average_salary: int, start: date, end: date) -> int:
    holidays = count_holidays(start, end)
    total_days = (end - start).days + 1
    paid_days = total_days - holidays

    if paid_days == 0:
        return 0  # nothing to pay

    daily_rate = average_salary / AVERAGE_DAYS_IN_MONTH
    return math.ceil(daily_rate * paid_days)



#step4. Master function

"""Summary:
Runs the formula that matches the mode chosen by utils.validator.resolve_mode"""

def calculate_vacation_pay(average_salary: int, mode: VacationMode) -> int:
    if isinstance(mode, ByDayCount):
        amount = pay_by_days(average_salary, mode.days)
    elif isinstance(mode, ByDateRange):
        amount = pay_by_date_range(average_salary, mode.start, mode.end)
    else:
        raise TypeError(f"Unknown calculation mode: {mode!r}")

    logger.debug("vacation pay | salary=%s | mode=%s | amount=%s", average_salary, mode, amount)
    return amount
