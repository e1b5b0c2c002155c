from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from .errors import StencilExprError
from .values import Lookup


class Context(Lookup):
    """
    A stack of variable scopes used as the root of path resolution.

    Lookups search from the innermost scope outwards and return `None` for
    names no scope defines.
    """

    def __init__(self, dictionary: Mapping[str, Any] | None = None, **kwargs: Any):
        scope = dict(dictionary or {})
        scope.update(kwargs)
        self._scopes: list[dict[str, Any]] = [scope]

    def lookup(self, name: str) -> Any:
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def __getitem__(self, name: str) -> Any:
        return self.lookup(name)

    def __setitem__(self, name: str, value: Any):
        self._scopes[-1][name] = value

    def __contains__(self, name: object) -> bool:
        return any(name in scope for scope in self._scopes)

    @contextmanager
    def push(self, dictionary: Mapping[str, Any] | None = None) -> Iterator["Context"]:
        """
        Push a new innermost scope for the duration of a `with` block.

        Examples:
            >>> context = Context({"name": "outer"})
            >>> with context.push({"name": "inner"}):
            ...     context["name"]
            'inner'
            >>> context["name"]
            'outer'
        """
        self._scopes.append(dict(dictionary or {}))
        try:
            yield self
        finally:
            self.pop()

    def pop(self) -> dict[str, Any]:
        if len(self._scopes) == 1:
            raise StencilExprError("Cannot pop the outermost context scope.")
        return self._scopes.pop()

    def flatten(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for scope in self._scopes:
            merged.update(scope)
        return merged
