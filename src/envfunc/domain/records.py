"""Environment variable records."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class EnvType(Enum):
    """Declared value types for registered variables."""

    BOOL = "bool"
    INT = "int"
    STRING = "string"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]


_PYTHON_TYPES = {
    EnvType.BOOL: bool,
    EnvType.INT: int,
    EnvType.STRING: str,
}


@dataclass
class EnvVarRecord:
    """A registered environment variable.

    ``value`` only holds the most recent resolution and is rewritten on
    every lookup; ``default`` is what registration supplied.
    """

    name: str
    description: str
    default: Any
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "default": self.default,
            "value": self.value,
        }
