from .base import Scenario
from .motor_start import DirectOnLineStartScenario

__all__ = [
    "Scenario",
    "DirectOnLineStartScenario",
]
