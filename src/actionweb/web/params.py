"""Multi-valued request parameters.

``QueryParams`` is the immutable parameter store behind ``Request``.
``RequestParameters`` is the read-only name -> values view a web
invocation exposes over any request's parameters.
"""

from collections.abc import Iterator, Mapping
from typing import Protocol, runtime_checkable
from urllib.parse import parse_qs


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        parsed = parse_qs(query_string, keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str | list[str] | tuple[str, ...]]) -> "QueryParams":
        """Build from a mapping of name -> value or values."""
        params = cls()
        data = {
            key: [value] if isinstance(value, str) else list(value)
            for key, value in pairs.items()
        }
        object.__setattr__(params, "_data", data)
        return params

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))


class RequestParameters(Mapping[str, tuple[str, ...]]):
    """Read-only view of a request's parameters as name -> all values.

    Reads through to the underlying ``MultiValueMapping`` on every
    access; nothing is copied.
    """

    __slots__ = ("_source",)

    def __init__(self, source: MultiValueMapping) -> None:
        self._source = source

    def __getitem__(self, key: str) -> tuple[str, ...]:
        if key not in self._source:
            raise KeyError(key)
        return tuple(self._source.get_list(key))

    def __contains__(self, key: object) -> bool:
        return key in self._source

    def __iter__(self) -> Iterator[str]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return f"RequestParameters({dict(self)!r})"

    def first(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for *key*, or *default* if missing."""
        return self._source.get(key, default)
