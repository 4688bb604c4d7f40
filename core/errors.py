"""
Exception hierarchy of the inrush simulator.
"""
from __future__ import annotations


class InrushSimulationError(Exception):
    """Base class for all simulator errors"""


class UnknownMotorType(InrushSimulationError, LookupError):
    """Motor type identifier is not in the catalog"""

    def __init__(self, motor_id, known: tuple[str, ...] = ()):
        self.motor_id = motor_id
        self.known = known
        msg = f"Unknown motor type '{motor_id}'."
        if known:
            msg += f" Available: {', '.join(known)}"
        super().__init__(msg)


class InvalidParameter(InrushSimulationError, ValueError):
    """Request field outside its valid domain"""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")
