"""Errors raised by evaluation domains."""


class DomainError(ValueError):
    """Base class for evaluation domain failures."""


class InvalidDomainSize(DomainError):
    """Requested size cannot be realised by the domain over this field."""


class SizeMismatch(DomainError):
    """Input vector is longer than the domain."""


class PreconditionViolated(DomainError):
    """Caller broke an operation's contract (index range, buffer length, zero divisor)."""
