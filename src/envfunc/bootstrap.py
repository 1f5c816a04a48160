"""Bootstrap - assemble the registry an evaluator will use.

Call once at start-up, register variables on the returned registry, then
install ``registry.functions()`` into the evaluator.
"""

from typing import Mapping, Optional

import structlog

from envfunc.config import Settings, settings as default_settings
from envfunc.services.env_registry import EnvRegistry, set_env_registry

logger = structlog.get_logger()


def build_registry(
    config: Optional[Settings] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    install: bool = False,
) -> EnvRegistry:
    """Configure logging and build a registry from *config*.

    Args:
        config: Settings to use; the global settings when omitted
        environ: Environment override, mainly for tests
        install: Also make it the process-wide registry
    """
    config = config or default_settings
    config.setup_logging()

    registry = EnvRegistry(
        environ=environ,
        on_bool_parse_error=config.bool_parse_error,
        on_int_parse_error=config.int_parse_error,
    )
    if install:
        set_env_registry(registry)

    logger.info(
        "env_registry_built",
        bool_parse_error=config.bool_parse_error,
        int_parse_error=config.int_parse_error,
        installed=install,
    )
    return registry
