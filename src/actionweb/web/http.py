"""Request-scope object protocols and plain implementations.

The web factory only needs to recognise the request, response and
application context objects of a request, so they are described as
runtime-checkable protocols. Hosts plug in their own transport objects;
``Request``, ``Response`` and ``AppContext`` are minimal concrete types
for embedding and tests.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from urllib.parse import urlsplit

from actionweb.web.params import MultiValueMapping, QueryParams


@runtime_checkable
class HttpRequest(Protocol):
    """The request of the current web request."""

    method: str
    path: str

    @property
    def parameters(self) -> MultiValueMapping: ...
    @property
    def session(self) -> MutableMapping[str, Any]: ...


@runtime_checkable
class HttpResponse(Protocol):
    """The response being built for the current web request."""

    status: int

    @property
    def headers(self) -> MutableMapping[str, str]: ...
    def write(self, chunk: str | bytes) -> None: ...


@runtime_checkable
class WebContext(Protocol):
    """Application-wide context shared by every request."""

    name: str

    def get_attribute(self, name: str, default: Any = None) -> Any: ...
    def set_attribute(self, name: str, value: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable request. Only the session dict's contents mutate."""

    method: str
    path: str
    parameters: QueryParams = field(default_factory=QueryParams)
    headers: dict[str, str] = field(default_factory=dict)
    session: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_url(cls, method: str, url: str, **kwargs: Any) -> "Request":
        """Build a request from ``path?query``."""
        parts = urlsplit(url)
        return cls(
            method=method.upper(),
            path=parts.path or "/",
            parameters=QueryParams(parts.query),
            **kwargs,
        )


@dataclass(slots=True)
class Response:
    """A mutable response buffer."""

    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    chunks: list[bytes] = field(default_factory=list)

    def write(self, chunk: str | bytes) -> None:
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        self.chunks.append(chunk)

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


@dataclass(slots=True)
class AppContext:
    """Plain application context: a name and an attribute dict."""

    name: str = "app"
    attributes: dict[str, Any] = field(default_factory=dict)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = value
