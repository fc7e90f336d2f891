# Non-working public holidays

"""Summary:
A fixed (month, day) table of non-working public holidays.
The year is ignored, so the same table applies to every year."""

from datetime import date, timedelta

NON_WORKING_HOLIDAYS = frozenset({
    (1, 1), (1, 2), (1, 3), (1, 4), (1, 5), (1, 6), (1, 7), (1, 8),  # New Year holidays
    (2, 23),  # Defender of the Fatherland Day
    (3, 8),   # International Women's Day
    (5, 1),   # Spring and Labour Day
    (5, 9),   # Victory Day
    (6, 12),  # Russia Day
    (11, 4),  # Unity Day
})


def is_holiday(day: date) -> bool:
    return (day.month, day.day) in NON_WORKING_HOLIDAYS


def count_holidays(start: date, end: date) -> int:
    """
    Number of holidays between start and end, both inclusive.
    Returns 0 when start is after end.
    """
    count = 0
    current = start
    while current <= end:
        if is_holiday(current):
            count += 1
        current += timedelta(days=1)
    return count
