from typing import Any

import pytest

from stencilexpr import Context, FilterError, FilterRegistry


class Profile:
    def __init__(self, name: str, email: str | None = None):
        self.name = name
        self.email = email
        self._secret = "hidden"

    @property
    def display_name(self) -> str:
        return self.name.title()


def _fail(value: Any, *arguments: str) -> Any:
    raise FilterError(f"fail called with {value!r}")


@pytest.fixture
def calls() -> list[tuple[str, Any, list[str] | None]]:
    return []


@pytest.fixture
def registry(calls) -> FilterRegistry:
    registry = FilterRegistry()

    def record(name: str, fn):
        def wrapper(value, *arguments):
            calls.append((name, value, list(arguments) or None))
            return fn(value, *arguments)

        return wrapper

    registry.register_filter(
        "upper", record("upper", lambda x: x.upper() if x is not None else None)
    )
    registry.register_filter(
        "default", record("default", lambda x, fallback: fallback if x is None else x)
    )
    registry.register_filter("fail", record("fail", _fail))
    registry.register_filter(
        "args", record("args", lambda x, *arguments: list(arguments))
    )
    return registry


@pytest.fixture
def context() -> Context:
    return Context(
        {
            "user": {"name": "ada", "tags": ("admin", "staff")},
            "items": [10, 20, 30],
            "profile": Profile("grace hopper"),
            "title": "Welcome",
        }
    )
