# errors.py
from __future__ import annotations

from typing import Any


class EnigmaError(ValueError):
    """Base class for every validation failure raised by the machine."""

    def __init__(self, message: str, *, value: Any = None, constraint: str = "") -> None:
        super().__init__(message)
        self.value = value              # the offending input
        self.constraint = constraint    # the rule it broke

    def __repr__(self) -> str:
        return f"<{type(self).__name__} value={self.value!r} constraint={self.constraint!r}>"


class RotorError(EnigmaError):
    pass


class ReflectorError(EnigmaError):
    pass


class PlugboardError(EnigmaError):
    pass


class InputError(EnigmaError):
    pass


__all__ = [
    "EnigmaError",
    "RotorError",
    "ReflectorError",
    "PlugboardError",
    "InputError",
]
