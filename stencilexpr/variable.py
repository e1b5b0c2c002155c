from dataclasses import dataclass
from typing import Any, Protocol

from .values import node_for, normalize

_QUOTES = ("'", '"')


class Resolvable(Protocol):
    def resolve(self, context: Any) -> Any: ...


@dataclass(frozen=True)
class Variable(Resolvable):
    """
    A dotted template variable such as `user.name` or `items.first`.
    """

    variable: str

    @property
    def is_literal(self) -> bool:
        return (
            len(self.variable) >= 2
            and self.variable[0] in _QUOTES
            and self.variable[0] == self.variable[-1]
        )

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(segment for segment in self.variable.split(".") if segment)

    def resolve(self, context: Any) -> Any:
        """
        Resolve this variable against `context`.

        String literals resolve to their unquoted content. Otherwise each
        segment is looked up in the value produced by the previous one, starting
        from `context`. Missing data resolves to `None` instead of raising.

        Args:
            context: The lookup root, usually a `Context` or a mapping.

        Returns:
            The resolved value with containers normalized to `list`/`dict`, or
            `None` when the path does not resolve.

        Examples:
            >>> Variable("a.b.c").resolve({"a": {"b": {"c": 42}}})
            42
            >>> Variable("items.count").resolve({"items": [10, 20, 30]})
            3
            >>> Variable("'literal'").resolve({})
            'literal'
        """
        if self.is_literal:
            return self.variable[1:-1]

        segments = self.segments
        if not segments:
            return None

        current = context
        for segment in segments:
            current = node_for(current).get(segment)
        return normalize(current)
