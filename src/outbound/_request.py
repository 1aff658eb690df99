"""Immutable outbound HTTP request."""

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from .errors import NullOrMissingFieldError

BINARY_DATA = "Binary data"


def _copy_headers(
    headers: Mapping[str, Sequence[str] | str | None], method: str, url: str
) -> Mapping[str, tuple[str, ...]]:
    copy: dict[str, tuple[str, ...]] = {}
    for name, values in headers.items():
        if values is None:
            copy[name] = ()
            continue
        if isinstance(values, str):
            values = (values,)
        values = tuple(values)
        if any(value is None for value in values):
            raise NullOrMissingFieldError(
                "headers", f"values of header {name} of {method} {url}"
            )
        copy[name] = values
    return MappingProxyType(copy)


@dataclass(frozen=True, eq=False)
class Request:
    """An immutable request to an http server.

    ``headers`` is copied on construction and exposed read-only, in the order
    the names were first inserted. ``body`` is not copied: callers hand over
    the bytes and must not change them afterwards. When ``charset`` is set,
    ``body.decode(charset)`` gives back the text the body was encoded from.

    Raises:
        NullOrMissingFieldError: If ``method`` is missing or empty, or if
            ``url`` or ``headers`` is ``None``.
    """

    method: str
    url: str
    headers: Mapping[str, Sequence[str] | str | None]
    body: bytes | None = None
    charset: str | None = None

    def __post_init__(self) -> None:
        if not self.method:
            raise NullOrMissingFieldError("method", f"method of {self.url}")
        if self.url is None:
            raise NullOrMissingFieldError("url", "url")
        if self.headers is None:
            raise NullOrMissingFieldError(
                "headers", f"headers of {self.method} {self.url}"
            )
        object.__setattr__(
            self, "headers", _copy_headers(self.headers, self.method, self.url)
        )

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        *,
        headers: Mapping[str, Sequence[str] | str | None] | None = None,
        body: bytes | None = None,
        charset: str | None = None,
    ) -> "Request":
        """Build a request, treating missing ``headers`` as no headers."""
        return cls(
            method,
            url,
            {} if headers is None else headers,
            body=body,
            charset=charset,
        )

    def replace(self, **changes: Any) -> "Request":
        """Return a new request with ``changes`` applied, validated again."""
        return dataclasses.replace(self, **changes)

    @property
    def text(self) -> str | None:
        """The body as text, or ``None`` if there is no body or no charset."""
        if self.body is None or self.charset is None:
            return None
        return self.body.decode(self.charset)

    def header_lines(self) -> Iterable[tuple[str, str]]:
        """Yield ``(name, value)`` for every header value, in order."""
        for name, values in self.headers.items():
            for value in values:
                yield name, value

    def render(self) -> str:
        """Render the request for diagnostics.

        The output is not meant to be sent on the wire or parsed back: header
        values and body text are written as they are, newlines included.
        """
        lines = [f"{self.method} {self.url} HTTP/1.1\n"]
        for name, value in self.header_lines():
            lines.append(f"{name}: {value}\n")
        if self.body is not None:
            lines.append("\n")
            lines.append(self.body_for_display())
        return "".join(lines)

    def body_for_display(self) -> str | None:
        """The body as shown in diagnostics, or ``None`` without a body.

        Binary bodies show as ``Binary data``. Malformed text is replaced
        rather than raised.
        """
        if self.body is None:
            return None
        if self.charset is None:
            return BINARY_DATA
        return self.body.decode(self.charset, errors="replace")

    def _key(self) -> tuple:
        return (
            self.method,
            self.url,
            tuple(self.headers.items()),
            self.body,
            self.charset,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Request):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.render()
