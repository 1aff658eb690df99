class OutboundError(Exception):
    """Base class for every error raised by outbound."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NullOrMissingFieldError(OutboundError, ValueError):
    """Raised when a request is built without a required field.

    The message carries enough of the request (method, url) to tell which
    call site produced the invalid request.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ConfigurationError(OutboundError):
    """Raised when timeout settings read from the environment are invalid."""
