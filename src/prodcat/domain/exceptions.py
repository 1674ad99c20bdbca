"""Domain-level exceptions.

Every input problem the catalog can run into is a subclass of
DomainException, so the console session can catch them uniformly,
show the message and ask again.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyInputError(ValidationError):
    """A prompt was answered with blank text."""

    def __init__(self, message: str = "Input cannot be empty. Please try again.") -> None:
        super().__init__(message)


class InvalidPriceError(ValidationError):
    """A price was not a number, or was zero or negative."""

    def __init__(self, message: str = "Invalid price. Please enter a positive number.") -> None:
        super().__init__(message)


class InvalidCommandError(DomainException):
    """The menu answer was not one of the known command letters."""

    def __init__(self, message: str = "Invalid choice. Please try again.") -> None:
        super().__init__(message)
