from .errors import InrushSimulationError, UnknownMotorType, InvalidParameter
from .catalog import MotorCategory, RotorType, MotorProfile, MOTOR_PROFILES, lookup, motor_ids
from .parameters import SimulationRequest
from .state import Sample, SAMPLE_FIELDS
from .results import SimulationResult

__all__ = [
    "InrushSimulationError",
    "UnknownMotorType",
    "InvalidParameter",
    "MotorCategory",
    "RotorType",
    "MotorProfile",
    "MOTOR_PROFILES",
    "lookup",
    "motor_ids",
    "SimulationRequest",
    "Sample",
    "SAMPLE_FIELDS",
    "SimulationResult",
]
