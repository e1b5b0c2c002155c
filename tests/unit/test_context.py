import pytest

from stencilexpr import Context, StencilExprError


def test_context__lookup_returns_none_for_unknown_name():
    assert Context().lookup("missing") is None


def test_context__keyword_and_dictionary_values_are_merged():
    context = Context({"a": 1}, b=2)

    assert context["a"] == 1
    assert context["b"] == 2


def test_context__setitem_writes_innermost_scope():
    context = Context(name="outer")

    with context.push():
        context["name"] = "inner"
        assert context["name"] == "inner"
    assert context["name"] == "outer"


def test_context__push_restores_scope_after_exception():
    context = Context(name="outer")

    with pytest.raises(RuntimeError):
        with context.push({"name": "inner"}):
            raise RuntimeError("boom")
    assert context["name"] == "outer"


def test_context__none_value_shadows_outer_scope():
    context = Context(name="outer")

    with context.push({"name": None}):
        assert context["name"] is None


def test_context__contains():
    context = Context(a=1)

    assert "a" in context
    assert "b" not in context


def test_context__pop_outermost_scope_raises():
    with pytest.raises(StencilExprError):
        Context().pop()


def test_context__flatten_merges_scopes():
    context = Context(a=1, b=1)

    with context.push({"b": 2}):
        assert context.flatten() == {"a": 1, "b": 2}


def test_context__does_not_copy_caller_values_deeply():
    items = [1, 2]
    context = Context(items=items)

    assert context["items"] is items
