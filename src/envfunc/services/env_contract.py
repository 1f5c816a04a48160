"""Contract listing for registered environment variables.

Used to build help and documentation output from registration metadata.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from envfunc.domain.records import EnvType
from envfunc.services.env_registry import EnvRegistry


def _format_default(env_type: EnvType, default: Any) -> str:
    if env_type is EnvType.BOOL and isinstance(default, bool):
        return "true" if default else "false"
    if env_type is EnvType.STRING:
        return repr(default) if isinstance(default, str) else str(default)
    return str(default)


def list_env_contracts(
    registry: EnvRegistry,
    env_types: Optional[Iterable[EnvType]] = None,
) -> List[Dict[str, Any]]:
    """List registered variables sorted by type, then name.

    Args:
        registry: Registry to read
        env_types: Optional types to include; all types when omitted

    Returns:
        List of contract dicts with name, type, description and default
    """
    allowed = list(EnvType) if env_types is None else [EnvType(t) for t in env_types]
    contracts: List[Dict[str, Any]] = []
    for env_type in EnvType:
        if env_type not in allowed:
            continue
        entries: List[Dict[str, Any]] = []

        def collect(name: str, description: str, default: Any, env_type: EnvType = env_type) -> None:
            entries.append(
                {
                    "name": name,
                    "type": env_type.value,
                    "description": description,
                    "default": default,
                }
            )

        registry.range_env(env_type, collect)
        contracts.extend(sorted(entries, key=lambda item: item["name"]))
    return contracts


def render_env_contract(
    registry: EnvRegistry,
    env_types: Optional[Iterable[EnvType]] = None,
) -> str:
    """Render registered variables as a help text block."""
    contracts = list_env_contracts(registry, env_types)
    lines: List[str] = ["Environment variables:"]
    if not contracts:
        lines.append("- none registered")
    for item in contracts:
        env_type = EnvType(item["type"])
        description = item["description"] or "no description"
        lines.append(
            f"- {item['name']} ({env_type.value}, default={_format_default(env_type, item['default'])}): "
            f"{description}"
        )
    return "\n".join(lines)
