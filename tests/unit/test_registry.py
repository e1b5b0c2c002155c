import pytest

from stencilexpr import Filter, FilterExpression, FilterRegistry, UnknownFilterError


def test_register_filter__wraps_callable():
    registry = FilterRegistry()

    registered = registry.register_filter("double", lambda value: value * 2)

    assert isinstance(registered, Filter)
    assert registry.find_filter("double") is registered


def test_register_filter__keeps_filter_instance():
    registry = FilterRegistry()
    path_filter = Filter(lambda value: value)

    assert registry.register_filter("same", path_filter) is path_filter


def test_register_filter__replaces_existing_name():
    registry = FilterRegistry({"f": lambda value: 1})
    registry.register_filter("f", lambda value: 2)

    assert registry.find_filter("f")(None) == 2


def test_filter_decorator__uses_function_name():
    registry = FilterRegistry()

    @registry.filter()
    def shout(value):
        return f"{value}!"

    assert FilterExpression("name|shout", registry).resolve({"name": "hi"}) == "hi!"


def test_filter_decorator__explicit_name():
    registry = FilterRegistry()

    @registry.filter("exclaim")
    def shout(value):
        return f"{value}!"

    assert "exclaim" in registry
    assert "shout" not in registry


def test_find_filter__raises_for_unknown_name():
    with pytest.raises(UnknownFilterError):
        FilterRegistry().find_filter("missing")


def test_names__sorted():
    registry = FilterRegistry({"b": str, "a": str})

    assert registry.names() == ["a", "b"]
