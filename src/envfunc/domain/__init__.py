"""Domain models for envfunc."""

from .errors import EnvFuncError, EnvNotRegisteredError, EnvParseError, FunctionCallError
from .records import EnvType, EnvVarRecord

__all__ = [
    "EnvFuncError",
    "EnvNotRegisteredError",
    "EnvParseError",
    "FunctionCallError",
    "EnvType",
    "EnvVarRecord",
]
