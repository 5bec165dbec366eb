"""Query string parameters as an immutable mapping.

Blank values are kept (``?flag=`` gives ``{"flag": ""}``) and malformed
percent escapes are tolerated rather than rejected.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Parsed query string. The first value for a repeated key wins.

    ``get_list`` keeps every value in arrival order.
    """

    __slots__ = ("_multi", "_raw")

    def __init__(self, query_string: str | bytes | None = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        multi: dict[str, list[str]] = {}
        for key, value in parse_qsl(query_string or "", keep_blank_values=True, errors="replace"):
            multi.setdefault(key, []).append(value)
        object.__setattr__(self, "_raw", query_string or "")
        object.__setattr__(self, "_multi", multi)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams are immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._multi[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._multi)

    def __len__(self) -> int:
        return len(self._multi)

    def __repr__(self) -> str:
        return f"QueryParams({self._raw!r})"

    @property
    def raw(self) -> str:
        return self._raw

    def get_list(self, key: str) -> list[str]:
        return list(self._multi.get(key, ()))

    def to_dict(self) -> dict[str, str]:
        """First value per key, in arrival order."""
        return {key: values[0] for key, values in self._multi.items()}
