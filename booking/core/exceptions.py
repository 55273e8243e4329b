"""
Domain-specific exception hierarchy for the booking backend.
"""


class BookingError(Exception):
    """Base class for all application-level errors."""


class FormatError(BookingError, ValueError):
    """Raised when a time string, day name or timezone identifier is malformed."""


class NotFoundOrUnauthorized(BookingError):
    """Raised when an owner-scoped operation affects no rows.

    Missing records and records owned by another identity are indistinguishable.
    """


class AuthenticationRequired(BookingError):
    """Raised when no owner identity accompanies a request."""


class ViolationError(BookingError):
    """Carries a complete list of validation violations to the HTTP edge."""

    def __init__(self, violations):
        self.violations = list(violations)
        super().__init__(f"{len(self.violations)} validation violation(s)")
