"""Builder for outgoing Subsonic query parameters."""

from typing import Self

# Parameter values accepted by the builder before text encoding
ParamValue = str | int | bool

Params = tuple[tuple[str, str], ...]


def _encode(value: ParamValue) -> str:
    """Encode a parameter value as the text the server expects."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Query:
    """Ordered accumulator of (key, value) query parameters.

    Optional arguments go through ``maybe_arg`` so that an absent value
    leaves no trace in the request, rather than being sent as a sentinel.

    Examples:
        ```python
        params = (
            Query()
            .arg("type", "newest")
            .maybe_arg("size", size)
            .build()
        )
        ```
    """

    def __init__(self) -> None:
        self._params: list[tuple[str, str]] = []

    @classmethod
    def with_arg(cls, key: str, value: ParamValue) -> Self:
        """Create a query holding a single parameter."""
        return cls().arg(key, value)

    def arg(self, key: str, value: ParamValue) -> Self:
        """Append a required parameter."""
        self._params.append((key, _encode(value)))
        return self

    def maybe_arg(self, key: str, value: ParamValue | None) -> Self:
        """Append a parameter only when a value is supplied."""
        if value is not None:
            self.arg(key, value)
        return self

    def build(self) -> Params:
        """Return the parameters in insertion order."""
        return tuple(self._params)
