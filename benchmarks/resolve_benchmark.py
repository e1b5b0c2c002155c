from benchbro import Case
from stencilexpr import Context, compile_expression

resolve_case = Case(
    name="resolve",
    case_type="cpu",
    metric_type="time",
    tags=["stencilexpr", "resolve"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)

_NESTED = Context({"a": {"b": {"c": {"d": {"e": {"f": {"g": {"h": 1}}}}}}}})
_ITEMS = Context({"users": [{"name": f"user-{i}"} for i in range(100)]})


@resolve_case.benchmark()
def simple_variable():
    compile_expression("a.b.c").resolve(_NESTED)


@resolve_case.benchmark()
def deep_nested_variable():
    compile_expression("a.b.c.d.e.f.g.h").resolve(_NESTED)


@resolve_case.benchmark()
def sequence_pseudo_properties_with_filters():
    compile_expression("users.last.name|upper|default:'nobody'").resolve(_ITEMS)


_COMPILED = compile_expression("users.first.name | capitalize | join:', ' | lower")


@resolve_case.benchmark()
def precompiled_filter_chain():
    _COMPILED.resolve(_ITEMS)
