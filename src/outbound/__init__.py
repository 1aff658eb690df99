"""outbound - immutable HTTP requests and per-request transport options."""

from ._config import OptionsConfig, clear_options_cache, load_options
from ._logging import LogLevel, RequestLogger
from ._options import Options
from ._request import Request
from ._transport import Client, HttpxClient, to_httpx_request, to_httpx_timeout
from .errors import ConfigurationError, NullOrMissingFieldError, OutboundError

__all__ = [
    "Client",
    "ConfigurationError",
    "HttpxClient",
    "LogLevel",
    "NullOrMissingFieldError",
    "Options",
    "OptionsConfig",
    "OutboundError",
    "Request",
    "RequestLogger",
    "clear_options_cache",
    "load_options",
    "to_httpx_request",
    "to_httpx_timeout",
]
