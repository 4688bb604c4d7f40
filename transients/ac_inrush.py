"""
Three-phase sinusoidal current with a decaying inrush amplitude.
"""
from __future__ import annotations

import numpy as np

from envelopes.base import AmplitudeEnvelope
from .base import PhaseCurrent, PHASE_OFFSETS


class ThreePhaseInrushCurrent(PhaseCurrent):
    """
    i_k = A(t) * sin(omega*t + phi_k), k in {U, V, W}

    where phi_U = phase_shift, phi_V = phase_shift - 2pi/3, phi_W = phase_shift + 2pi/3
    """

    def __init__(
        self,
        envelope: AmplitudeEnvelope,
        frequency: float = 50.0,
        phase_shift: float = 0.0,
    ):
        self.envelope = envelope
        self.frequency = frequency
        self.phase_shift = phase_shift
        self._omega = 2 * np.pi * frequency

    def __call__(self, t_run: np.ndarray) -> np.ndarray:
        t_run = np.asarray(t_run, dtype=float)
        wt = self._omega * t_run + self.phase_shift
        return self.envelope(t_run) * np.sin(np.add.outer(PHASE_OFFSETS, wt))

    def describe(self) -> str:
        return (
            f"3-phase AC: f={self.frequency:.1f} Hz, "
            f"phi_0={np.degrees(self.phase_shift):.1f} deg; "
            f"{self.envelope.describe()}"
        )
