from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Any

from .errors import FilterError
from .values import is_sequence


class Filter:
    def __init__(self, filter_fn: Callable[..., Any]):
        self._filter_fn = filter_fn

    def __call__(self, value: Any, arguments: Sequence[str] | None = None) -> Any:
        if arguments is None:
            return self._filter_fn(value)
        return self._filter_fn(value, *arguments)

    def __repr__(self) -> str:
        name = getattr(self._filter_fn, "__name__", type(self._filter_fn).__name__)
        return f"Filter({name})"


def _capitalize(value: Any) -> Any:
    return str(value).capitalize() if value is not None else None


def _uppercase(value: Any) -> Any:
    return str(value).upper() if value is not None else None


def _lowercase(value: Any) -> Any:
    return str(value).lower() if value is not None else None


def _default(value: Any, *arguments: str) -> Any:
    if len(arguments) != 1:
        raise FilterError("Filter 'default' takes exactly one argument.")
    return arguments[0] if value is None else value


def _join(value: Any, *arguments: str) -> Any:
    if len(arguments) > 1:
        raise FilterError("Filter 'join' takes at most one argument.")
    if not is_sequence(value):
        return value
    separator = arguments[0] if arguments else ""
    return separator.join(str(item) for item in value)


DEFAULT_FILTER_FUNCTION_REGISTRY = MappingProxyType(
    {
        "capitalize": _capitalize,
        "uppercase": _uppercase,
        "upper": _uppercase,
        "lowercase": _lowercase,
        "lower": _lowercase,
        "default": _default,
        "join": _join,
    }
)
