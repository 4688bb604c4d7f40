"""
Decaying DC offset injected by the switching instant.
"""
from __future__ import annotations

import numpy as np

from envelopes.base import AmplitudeEnvelope
from .base import PhaseCurrent, PHASE_OFFSETS


class DecayingDcOffset(PhaseCurrent):
    """
    dc_k = -A(t) * sin(phi_k) * exp(-t / tau)

    Cancels the AC term of each phase at t = 0, so every phase current
    starts from zero. Zero for phase U at phi_0 = 0 or 180 degrees,
    largest at 90 or 270 degrees.
    """

    def __init__(
        self,
        envelope: AmplitudeEnvelope,
        phase_shift: float = 0.0,
        tau: float = 0.05,
    ):
        if tau <= 0.0:
            raise ValueError(f"tau must be > 0, got {tau}.")
        self.envelope = envelope
        self.phase_shift = phase_shift
        self.tau = tau

    def __call__(self, t_run: np.ndarray) -> np.ndarray:
        t_run = np.asarray(t_run, dtype=float)
        weights = -np.sin(self.phase_shift + PHASE_OFFSETS)
        decay = self.envelope(t_run) * np.exp(-t_run / self.tau)
        return np.multiply.outer(weights, decay)

    def initial(self) -> np.ndarray:
        """Offsets [dcU, dcV, dcW] at the connection instant."""
        return self(0.0)

    def describe(self) -> str:
        return (
            f"DC offset: tau_DC={self.tau * 1e3:.0f} ms, "
            f"dcU(0)={self.initial()[0]:.1f} A"
        )
