"""Domain errors shared by the banking services."""


class HexabankError(Exception):
    """Base class for all domain errors."""

    default_message = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotFoundError(HexabankError):
    """The requested entity does not exist."""

    default_message = "not found"


class BadRequestError(HexabankError):
    """The request was rejected, for example because it looks fraudulent."""

    default_message = "bad request"


class InternalError(HexabankError):
    """An unexpected failure in a dependency or in the service itself."""

    default_message = "internal error"