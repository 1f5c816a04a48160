"""Env Registry - typed environment variables for expression functions.

Variables are registered per type at start-up and resolved later, by name,
from the live environment:
- Unset or empty variables resolve to the registered default
- Unparseable values fall back to the default or raise, per type policy
- Each resolution rewrites the record's ``value``

Registration and resolution are not synchronized. Register everything
before handing the functions to an evaluator that may run concurrently.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional

import structlog

from envfunc.domain.errors import EnvNotRegisteredError, EnvParseError
from envfunc.domain.records import EnvType, EnvVarRecord
from envfunc.infrastructure.config.parsing import parse_bool, parse_int
from envfunc.kernel.functions.function_spec import Function, Parameter

logger = structlog.get_logger()

ParseErrorPolicy = Literal["default", "raise"]
EnvVisitor = Callable[[str, str, Any], None]

_PARSE_ERROR_POLICIES = ("default", "raise")

_PARSERS: Dict[EnvType, Callable[[str], Any]] = {
    EnvType.BOOL: parse_bool,
    EnvType.INT: parse_int,
    EnvType.STRING: str,
}


def _printable(value: str) -> str:
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


def _check_policy(policy: str) -> ParseErrorPolicy:
    if policy not in _PARSE_ERROR_POLICIES:
        raise ValueError(
            f"Unknown parse error policy '{policy}'. Allowed: {', '.join(_PARSE_ERROR_POLICIES)}"
        )
    return policy  # type: ignore[return-value]


class EnvRegistry:
    """Per-type registries of environment variables plus their resolvers.

    Registration never logs. A parse failure that falls back to the default
    emits an ``env_parse_fallback`` warning; failures that raise are left to
    the caller to report.
    """

    def __init__(
        self,
        *,
        environ: Optional[Mapping[str, str]] = None,
        on_bool_parse_error: ParseErrorPolicy = "default",
        on_int_parse_error: ParseErrorPolicy = "raise",
    ):
        """Initialize an empty registry.

        Args:
            environ: Environment to read from; ``os.environ`` when omitted
            on_bool_parse_error: "default" to fall back silently, "raise" to fail
            on_int_parse_error: Same choice for integer variables
        """
        self._environ = environ
        self._records: Dict[EnvType, Dict[str, EnvVarRecord]] = {
            env_type: {} for env_type in EnvType
        }
        self._policies: Dict[EnvType, ParseErrorPolicy] = {
            EnvType.BOOL: _check_policy(on_bool_parse_error),
            EnvType.INT: _check_policy(on_int_parse_error),
            EnvType.STRING: "raise",
        }

        self.bool_function = self._build_function("env_bool", EnvType.BOOL, self.resolve_bool)
        self.int_function = self._build_function("env_int", EnvType.INT, self.resolve_int)
        self.string_function = self._build_function(
            "env_string", EnvType.STRING, self.resolve_string
        )

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def parse_error_policy(self, env_type: EnvType) -> ParseErrorPolicy:
        return self._policies[env_type]

    # Registration

    def register(self, env_type: EnvType, name: str, description: str, default: Any) -> None:
        """Insert or replace the record for *name* in *env_type*'s registry."""
        self._records[env_type][name] = EnvVarRecord(
            name=name,
            description=description,
            default=default,
            value=default,
        )

    def register_bool_env(self, name: str, description: str, default: bool) -> None:
        self.register(EnvType.BOOL, name, description, default)

    def register_int_env(self, name: str, description: str, default: int) -> None:
        self.register(EnvType.INT, name, description, default)

    def register_string_env(self, name: str, description: str, default: str) -> None:
        self.register(EnvType.STRING, name, description, default)

    # Iteration

    def range_env(self, env_type: EnvType, visitor: EnvVisitor) -> None:
        """Call ``visitor(name, description, default)`` for every record.

        Order is not guaranteed.
        """
        for record in list(self._records[env_type].values()):
            visitor(record.name, record.description, record.default)

    def range_bool_env(self, visitor: Callable[[str, str, bool], None]) -> None:
        self.range_env(EnvType.BOOL, visitor)

    def range_int_env(self, visitor: Callable[[str, str, int], None]) -> None:
        self.range_env(EnvType.INT, visitor)

    def range_string_env(self, visitor: Callable[[str, str, str], None]) -> None:
        self.range_env(EnvType.STRING, visitor)

    def records(self, env_type: EnvType) -> List[EnvVarRecord]:
        """Registered records of one type, including their last resolved value."""
        return list(self._records[env_type].values())

    def is_registered(self, env_type: EnvType, name: str) -> bool:
        return name in self._records[env_type]

    # Resolution

    def resolve(self, env_type: EnvType, name: str) -> Any:
        """Resolve *name* from the environment as *env_type*.

        Raises:
            EnvNotRegisteredError: If *name* is not registered for *env_type*
            EnvParseError: If the value does not parse and the policy is "raise"
        """
        record = self._records[env_type].get(name)
        if record is None:
            raise EnvNotRegisteredError(name, env_type.value)

        raw = self.environ.get(name, "")
        if raw == "":
            record.value = record.default
            return record.default

        try:
            value = _PARSERS[env_type](raw)
        except ValueError as exc:
            if self._policies[env_type] == "raise":
                raise EnvParseError(name, raw, env_type.value, str(exc)) from exc
            logger.warning(
                "env_parse_fallback",
                name=_printable(name),
                type=env_type.value,
                raw=_printable(raw),
                default=record.default,
            )
            value = record.default

        record.value = value
        return value

    def resolve_bool(self, name: str) -> bool:
        return self.resolve(EnvType.BOOL, name)

    def resolve_int(self, name: str) -> int:
        return self.resolve(EnvType.INT, name)

    def resolve_string(self, name: str) -> str:
        return self.resolve(EnvType.STRING, name)

    # Expression functions

    def functions(self) -> Dict[str, Function]:
        """The resolver functions keyed by the name an evaluator calls them by."""
        return {
            fn.name: fn
            for fn in (self.bool_function, self.int_function, self.string_function)
        }

    @staticmethod
    def _build_function(
        fn_name: str,
        env_type: EnvType,
        resolver: Callable[[str], Any],
    ) -> Function:
        return Function(
            name=fn_name,
            params=[Parameter("name", str, "Registered environment variable name")],
            return_type=env_type.python_type,
            impl=resolver,
            description=f"Read a registered {env_type.value} environment variable.",
        )


# Global registry instance
_registry: Optional[EnvRegistry] = None


def get_env_registry() -> EnvRegistry:
    """Get the process-wide registry."""
    global _registry
    if _registry is None:
        _registry = EnvRegistry()
    return _registry


def set_env_registry(registry: Optional[EnvRegistry]) -> None:
    """Replace the process-wide registry; ``None`` resets it."""
    global _registry
    _registry = registry


def register_bool_env(name: str, description: str, default: bool) -> None:
    get_env_registry().register_bool_env(name, description, default)


def register_int_env(name: str, description: str, default: int) -> None:
    get_env_registry().register_int_env(name, description, default)


def register_string_env(name: str, description: str, default: str) -> None:
    get_env_registry().register_string_env(name, description, default)


def range_bool_env(visitor: Callable[[str, str, bool], None]) -> None:
    get_env_registry().range_bool_env(visitor)


def range_int_env(visitor: Callable[[str, str, int], None]) -> None:
    get_env_registry().range_int_env(visitor)


def range_string_env(visitor: Callable[[str, str, str], None]) -> None:
    get_env_registry().range_string_env(visitor)
