"""
Экспоненциально затухающая огибающая пускового тока.
"""
from __future__ import annotations

import numpy as np

from .base import AmplitudeEnvelope


class InrushDecayEnvelope(AmplitudeEnvelope):
    """
    A(t) = Im * (1 + (Kip - 1) * exp(-t / tau))

    A(0) = Kip * Im (полный пусковой ток), A(inf) = Im (номинальный режим)
    """

    def __init__(self, rated_peak: float, inrush_multiplier: float, tau: float):
        """
        Args:
            rated_peak: амплитуда номинального тока, А
            inrush_multiplier: кратность пускового тока
            tau: постоянная затухания, с
        """
        self.rated_peak = rated_peak
        self.inrush_multiplier = inrush_multiplier
        self.tau = tau

    @property
    def initial(self) -> float:
        """Амплитуда в момент включения"""
        return self.rated_peak * self.inrush_multiplier

    def __call__(self, t_run: np.ndarray) -> np.ndarray:
        decay = 1.0 + (self.inrush_multiplier - 1.0) * np.exp(-np.asarray(t_run) / self.tau)
        return self.rated_peak * decay

    def describe(self) -> str:
        return (
            f"Огибающая: {self.initial:.1f} → {self.rated_peak:.1f} А, "
            f"tau_AC = {self.tau * 1e3:.0f} мс"
        )
