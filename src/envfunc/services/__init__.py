"""Services layer for envfunc."""

from .env_contract import list_env_contracts, render_env_contract
from .env_registry import (
    EnvRegistry,
    ParseErrorPolicy,
    get_env_registry,
    range_bool_env,
    range_int_env,
    range_string_env,
    register_bool_env,
    register_int_env,
    register_string_env,
    set_env_registry,
)

__all__ = [
    "EnvRegistry",
    "ParseErrorPolicy",
    "get_env_registry",
    "set_env_registry",
    "register_bool_env",
    "register_int_env",
    "register_string_env",
    "range_bool_env",
    "range_int_env",
    "range_string_env",
    "list_env_contracts",
    "render_env_contract",
]
