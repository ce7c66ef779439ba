"""Exceptions raised by the scoring engine."""


class InvalidInputError(ValueError):
    """Raised when a caller passes a missing argument or an unknown domain."""

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument
