import logging
from enum import Enum

from ._options import Options
from ._request import Request


class LogLevel(str, Enum):
    """How much of a request gets logged."""

    NONE = "none"
    BASIC = "basic"
    HEADERS = "headers"
    FULL = "full"


class RequestLogger:
    """Logs outgoing requests at debug level on the ``outbound`` logger."""

    def __init__(
        self,
        level: LogLevel = LogLevel.NONE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.level = level
        self._logger = logger or logging.getLogger("outbound")

    def log_request(self, request: Request, options: Options | None = None) -> None:
        if self.level == LogLevel.NONE:
            return

        self._logger.debug(f"---> {request.method} {request.url} HTTP/1.1")

        if options is not None:
            self._logger.debug(
                f"connect timeout: {options.connect_timeout_millis}ms, "
                f"read timeout: {options.read_timeout_millis}ms"
            )

        if self.level == LogLevel.BASIC:
            return

        for name, value in request.header_lines():
            self._logger.debug(f"{name}: {value}")

        body_length = 0
        if request.body is not None:
            body_length = len(request.body)
            if self.level == LogLevel.FULL:
                self._logger.debug("")
                self._logger.debug(request.body_for_display())

        self._logger.debug(f"---> END HTTP ({body_length}-byte body)")
