"""Timeout settings read from the environment.

``OUTBOUND_CONNECT_TIMEOUT_MILLIS`` and ``OUTBOUND_READ_TIMEOUT_MILLIS`` set
the defaults a transport uses when no :class:`Options` is passed explicitly.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._options import (
    DEFAULT_CONNECT_TIMEOUT_MILLIS,
    DEFAULT_READ_TIMEOUT_MILLIS,
    Options,
)
from .errors import ConfigurationError

ENV_CONNECT_TIMEOUT_MILLIS = "OUTBOUND_CONNECT_TIMEOUT_MILLIS"
ENV_READ_TIMEOUT_MILLIS = "OUTBOUND_READ_TIMEOUT_MILLIS"


class OptionsConfig(BaseModel):
    """Validated timeout settings, in milliseconds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    connect_timeout_millis: int = Field(default=DEFAULT_CONNECT_TIMEOUT_MILLIS, ge=0)
    read_timeout_millis: int = Field(default=DEFAULT_READ_TIMEOUT_MILLIS, ge=0)

    def to_options(self) -> Options:
        return Options(self.connect_timeout_millis, self.read_timeout_millis)


def _read_env() -> dict[str, str]:
    values: dict[str, str] = {}
    connect = os.environ.get(ENV_CONNECT_TIMEOUT_MILLIS, "").strip()
    if connect:
        values["connect_timeout_millis"] = connect
    read = os.environ.get(ENV_READ_TIMEOUT_MILLIS, "").strip()
    if read:
        values["read_timeout_millis"] = read
    return values


@lru_cache(maxsize=8)
def load_options(env_file: str | None = None) -> Options:
    """Build :class:`Options` from the environment.

    Args:
        env_file: Optional dotenv file loaded first. Variables already set in
            the process environment win over the file.

    Returns:
        Options with unset values falling back to the defaults.

    Raises:
        ConfigurationError: If a variable is not a non-negative integer.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)

    try:
        config = OptionsConfig.model_validate(_read_env())
    except ValidationError as e:
        raise ConfigurationError(f"Invalid timeout configuration: {e}") from e

    return config.to_options()


def clear_options_cache() -> None:
    """Clear the cached options. Intended for tests."""
    load_options.cache_clear()
