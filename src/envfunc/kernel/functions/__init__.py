"""Expression function contract."""

from envfunc.kernel.functions.function_spec import Function, Parameter

__all__ = [
    "Function",
    "Parameter",
]
