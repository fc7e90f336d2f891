"""
Request errors for the vacation pay calculation.

Every error is terminal for the request; the HTTP layer turns each one into a
400 response whose body is `message`.
"""


class VacationPayError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingRequiredField(VacationPayError):
    """A required parameter is absent or blank."""


class NotANumber(VacationPayError):
    """A numeric parameter failed integer parsing."""


class NotADate(VacationPayError):
    """A date parameter is not in dd-mm-yy format."""


class SalaryOutOfRange(VacationPayError):
    """averageSalary parsed but lies outside the accepted bounds."""


class DaysOutOfRange(VacationPayError):
    """numberOfDays parsed but lies outside the accepted bounds."""


class AmbiguousOrMissingMode(VacationPayError):
    """Neither or both of numberOfDays and the startDate/endDate pair were given."""


class InvalidDateOrder(VacationPayError):
    """End date precedes start date, or the period length is out of range."""
