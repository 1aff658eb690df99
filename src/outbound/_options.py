from dataclasses import dataclass

DEFAULT_CONNECT_TIMEOUT_MILLIS = 10 * 1000
DEFAULT_READ_TIMEOUT_MILLIS = 60 * 1000


def _millis_to_seconds(millis: int) -> float | None:
    if millis == 0:
        return None
    return millis / 1000


@dataclass(frozen=True)
class Options:
    """Per-request settings every transport is required to honor.

    Values are stored as given. ``0`` means "no timeout" and is kept as is;
    negative values are left for the transport to reject.
    """

    connect_timeout_millis: int = DEFAULT_CONNECT_TIMEOUT_MILLIS
    read_timeout_millis: int = DEFAULT_READ_TIMEOUT_MILLIS

    @property
    def connect_timeout(self) -> float | None:
        """Connect timeout in seconds, ``None`` when unbounded."""
        return _millis_to_seconds(self.connect_timeout_millis)

    @property
    def read_timeout(self) -> float | None:
        """Read timeout in seconds, ``None`` when unbounded."""
        return _millis_to_seconds(self.read_timeout_millis)
