"""Exceptions raised by the function engine."""
from __future__ import annotations


class FunctionLabError(Exception):
    """Base class for engine errors."""


class UnsupportedFamilyError(FunctionLabError, ValueError):
    """A family name or operation the engine does not implement."""


class DegenerateCoefficientsError(FunctionLabError, ValueError):
    """A drawn coefficient makes the family ill-defined.

    Raised and handled inside the generator; callers never see it.
    """

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"coefficient {name}={value!r} makes the function degenerate")
        self.name = name
        self.value = value
