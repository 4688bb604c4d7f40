from .base import AmplitudeEnvelope
from .exponential import InrushDecayEnvelope

__all__ = [
    "AmplitudeEnvelope",
    "InrushDecayEnvelope",
]
