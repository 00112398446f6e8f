"""Immutable query string parameters.

Implements ``Mapping[str, str]``.  Parsing is deliberately literal:

- pairs are split on ``&``, then on the first ``=``
- a pair with an empty key is dropped
- a pair without ``=`` has the value ``""``
- nothing is percent-decoded
- on duplicate keys the last value wins for ``__getitem__``

Every input string parses; there is no malformed query string.
"""

from collections.abc import Iterator, Mapping


def _parse(query_string: str) -> dict[str, list[str]]:
    data: dict[str, list[str]] = {}
    if not query_string:
        return data
    for pair in query_string.split("&"):
        key, _, value = pair.partition("=")
        if not key:
            continue
        data.setdefault(key, []).append(value)
    return data


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as key -> list of values, in order.
        _raw: Raw query string (without the leading ``?``).

    ``__getitem__`` returns the last value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_data", _parse(query_string))

    def __getitem__(self, key: str) -> str:
        return self._data[key][-1]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the last value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[-1]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in query string order."""
        return list(self._data.get(key, []))

    def to_dict(self) -> dict[str, str]:
        """Plain ``dict`` view, last value per key."""
        return {key: values[-1] for key, values in self._data.items()}


def parse_query_string(query_string: str) -> QueryParams:
    """Parse a raw query string (no leading ``?``) into ``QueryParams``."""
    return QueryParams(query_string)
