"""Custom exception hierarchy for credit-schedule."""


class CreditScheduleError(Exception):
    """Base exception for all credit-schedule errors."""


class ValidationError(CreditScheduleError):
    """Raised when a request violates one or more declared field constraints.

    All violations are collected before raising; ``errors`` keeps them
    individually and the message joins them with ``", "``.
    """

    def __init__(self, errors: list[str] | tuple[str, ...] | str) -> None:
        if isinstance(errors, str):
            errors = (errors,)
        self.errors = tuple(errors)
        super().__init__(", ".join(self.errors))


class DuplicateCreditError(ValidationError):
    """Raised when a user already owns a credit with the requested name."""


class EntityNotFoundError(CreditScheduleError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class OutOfPolicyRangeError(CreditScheduleError):
    """Raised when the loan amount falls outside the allowed property-value band."""


class OperationFailedError(CreditScheduleError):
    """Raised when a persistence operation fails unexpectedly.

    The original exception is chained as ``__cause__``.
    """


class ConfigurationError(CreditScheduleError):
    """Raised when configuration is invalid or missing."""
