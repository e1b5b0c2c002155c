"""
Per-kind traversal of runtime values.

`node_for` wraps a value once per step into the node matching its kind, and
every node answers `get(segment)`. A miss is `None` (Absent); nodes never raise
for missing data.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Protocol

_INDEX_PATTERN = re.compile(r"[0-9]+")
_SCALAR_TYPES = (str, bytes, bytearray, Number)


class Lookup(ABC):
    """
    Base for variable scopes. Only subclasses and registered classes
    (`Lookup.register`) are resolved through `lookup`; other objects with a
    `lookup` attribute are plain objects.
    """

    @abstractmethod
    def lookup(self, name: str) -> Any:
        """Return the value bound to `name`, or `None` when it is unbound."""


class ValueNode(Protocol):
    def get(self, segment: str) -> Any: ...


class _ContextNode(ValueNode):
    def __init__(self, context: Lookup):
        self.context = context

    def get(self, segment):
        return self.context.lookup(segment)


class _MappingNode(ValueNode):
    def __init__(self, mapping: Mapping):
        self.mapping = mapping

    def get(self, segment):
        return self.mapping.get(segment)


class _SequenceNode(ValueNode):
    def __init__(self, sequence: Sequence):
        self.sequence = sequence

    def get(self, segment):
        if _INDEX_PATTERN.fullmatch(segment):
            index = int(segment)
            if index < len(self.sequence):
                return self.sequence[index]
            return None
        if segment == "first":
            return self.sequence[0] if self.sequence else None
        if segment == "last":
            return self.sequence[-1] if self.sequence else None
        if segment == "count":
            return len(self.sequence)
        return None


class _ObjectNode(ValueNode):
    def __init__(self, obj: Any):
        self.obj = obj

    def get(self, segment):
        if segment.startswith("_"):
            return None
        return getattr(self.obj, segment, None)


class _AbsentNode(ValueNode):
    def get(self, segment):
        return None


_ABSENT_NODE = _AbsentNode()


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def node_for(value: Any) -> ValueNode:
    # Context before Mapping: a scope may also expose a mapping interface.
    if isinstance(value, Lookup):
        return _ContextNode(value)
    if isinstance(value, Mapping):
        return _MappingNode(value)
    if is_sequence(value):
        return _SequenceNode(value)
    if value is None or isinstance(value, _SCALAR_TYPES):
        return _ABSENT_NODE
    return _ObjectNode(value)


def normalize(value: Any) -> Any:
    """
    Return container values as plain `list`/`dict` and anything else as-is.
    """
    if is_sequence(value):
        return value if type(value) is list else list(value)
    if isinstance(value, Mapping) and not isinstance(value, Lookup):
        return value if type(value) is dict else dict(value)
    return value
