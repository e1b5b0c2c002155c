import logging
from dataclasses import dataclass
from typing import Any

from .errors import TemplateSyntaxError, UnknownFilterError
from .filters import Filter
from .registry import FilterLookup
from .tokenizer import parse_filter_components, split_and_trim
from .variable import Resolvable, Variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterInvocation:
    filter: Filter
    arguments: tuple[str, ...] | None = None

    def invoke(self, value: Any) -> Any:
        arguments = list(self.arguments) if self.arguments is not None else None
        return self.filter(value, arguments)


def _bind_filter(
    token: str, filter_bit: str, registry: FilterLookup
) -> FilterInvocation:
    name, arguments = parse_filter_components(filter_bit)
    try:
        filter_fn = registry.find_filter(name)
    except (UnknownFilterError, KeyError) as ex:
        logger.debug("Unknown filter %r in expression %r", name, token)
        raise UnknownFilterError(name, token=token) from ex
    return FilterInvocation(
        filter=filter_fn,
        arguments=tuple(arguments) if arguments is not None else None,
    )


class FilterExpression(Resolvable):
    """
    A variable followed by a chain of filters, e.g. `user.name|upper|default:"N/A"`.

    Filters are looked up once, when the expression is built; an unknown filter
    name fails construction with `UnknownFilterError`. The expression is
    immutable afterwards and can be resolved against any number of contexts.
    """

    def __init__(self, token: str, registry: FilterLookup):
        bits = split_and_trim(token, "|")
        if not bits:
            raise TemplateSyntaxError(
                token=token,
                message="Variable tags must include at least 1 argument",
            )

        filter_invocations = tuple(
            _bind_filter(token, filter_bit, registry) for filter_bit in bits[1:]
        )
        self._variable = Variable(bits[0])
        self._filter_invocations = filter_invocations
        logger.debug(
            "Compiled expression %r with %d filter(s)", token, len(filter_invocations)
        )

    @classmethod
    def parse(cls, token: str, registry: FilterLookup) -> "FilterExpression":
        return cls(token, registry)

    @property
    def variable(self) -> Variable:
        return self._variable

    @property
    def filter_invocations(self) -> tuple[FilterInvocation, ...]:
        return self._filter_invocations

    def resolve(self, context: Any) -> Any:
        """
        Resolve the variable against `context` and pass it through each filter.

        Exceptions raised by a filter propagate unchanged and stop the chain.
        """
        result = self._variable.resolve(context)
        for invocation in self._filter_invocations:
            result = invocation.invoke(result)
        return result

    def __repr__(self) -> str:
        return (
            f"FilterExpression(variable={self._variable.variable!r}, "
            f"filters={len(self._filter_invocations)})"
        )
