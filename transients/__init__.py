from transients.base import PhaseCurrent, PHASE_OFFSETS
from transients.ac_inrush import ThreePhaseInrushCurrent
from transients.dc_offset import DecayingDcOffset

__all__ = [
    "PhaseCurrent",
    "PHASE_OFFSETS",
    "ThreePhaseInrushCurrent",
    "DecayingDcOffset",
]
