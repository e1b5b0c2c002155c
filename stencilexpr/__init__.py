from typing import Any

from .config import resolve_registry
from .context import Context
from .errors import (
    FilterError,
    StencilExprError,
    TemplateSyntaxError,
    UnknownFilterError,
)
from .expression import FilterExpression, FilterInvocation
from .filters import Filter
from .registry import FilterRegistry
from .variable import Variable

registry_name, registry = resolve_registry()


def compile_expression(token: str) -> FilterExpression:
    return FilterExpression(token, registry)


def resolve(token: str, context: Any) -> Any:
    return compile_expression(token).resolve(context)


__all__ = [
    "Context",
    "Filter",
    "FilterError",
    "FilterExpression",
    "FilterInvocation",
    "FilterRegistry",
    "StencilExprError",
    "TemplateSyntaxError",
    "UnknownFilterError",
    "Variable",
    "compile_expression",
    "registry",
    "registry_name",
    "resolve",
]
