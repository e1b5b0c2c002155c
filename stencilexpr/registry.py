import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .errors import UnknownFilterError
from .filters import Filter

logger = logging.getLogger(__name__)


class FilterLookup(Protocol):
    def find_filter(self, name: str) -> Filter: ...


class FilterRegistry(FilterLookup):
    def __init__(self, filters: Mapping[str, Callable[..., Any]] | None = None):
        self._filters: dict[str, Filter] = {}
        for name, filter_fn in (filters or {}).items():
            self.register_filter(name, filter_fn)

    def register_filter(
        self, name: str, filter_fn: Filter | Callable[..., Any]
    ) -> Filter:
        """
        Register a filter under `name`, replacing any filter already registered.

        Registered filters can be referenced in expressions as `value|name` or,
        with arguments, `value|name:"a",b`. The callable receives the current
        value followed by the (string) arguments.

        Args:
            name: Filter name used in expressions.
            filter_fn: A `Filter` or callable to wrap as `Filter`.

        Returns:
            The registered `Filter` instance.
        """
        if not isinstance(filter_fn, Filter):
            filter_fn = Filter(filter_fn)
        self._filters[name] = filter_fn
        logger.debug("Registered filter %r", name)
        return filter_fn

    def filter(
        self, name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Decorator form of `register_filter`, defaulting to the function's name.

        Examples:
            >>> registry = FilterRegistry()
            >>> @registry.filter()
            ... def shout(value):
            ...     return f"{value}!"
        """

        def decorator(filter_fn: Callable[..., Any]) -> Callable[..., Any]:
            self.register_filter(name or filter_fn.__name__, filter_fn)
            return filter_fn

        return decorator

    def find_filter(self, name: str) -> Filter:
        """
        Retrieve a registered filter by name.

        Raises:
            UnknownFilterError: If the filter name is not registered.
        """
        try:
            return self._filters[name]
        except KeyError as ex:
            raise UnknownFilterError(name) from ex

    def names(self) -> list[str]:
        return sorted(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters
