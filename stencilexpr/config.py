import os

from .filters import DEFAULT_FILTER_FUNCTION_REGISTRY
from .registry import FilterRegistry

BUILTINS_ENV_VAR = "STENCILEXPR_BUILTINS"
_VALID_BUILTINS = {"default", "empty"}


def resolve_registry(preference: str | None = None) -> tuple[str, FilterRegistry]:
    requested = (preference or os.getenv(BUILTINS_ENV_VAR, "default")).strip().lower()

    if requested not in _VALID_BUILTINS:
        valid_options = ", ".join(sorted(_VALID_BUILTINS))
        raise ValueError(
            f"Invalid builtins '{requested}'. Expected one of: {valid_options}."
        )

    if requested == "empty":
        return "empty", FilterRegistry()
    return "default", FilterRegistry(DEFAULT_FILTER_FUNCTION_REGISTRY)
