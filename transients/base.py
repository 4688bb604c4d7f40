"""
Abstract per-phase current component.

A component returns instantaneous currents [iU, iV, iW] as a function of
the time elapsed since connection.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


# Phase displacement of U, V, W relative to the switching angle
PHASE_OFFSETS = np.array([0.0, -2 * np.pi / 3, 2 * np.pi / 3])


class PhaseCurrent(ABC):
    """Base class for three-phase current components."""

    @abstractmethod
    def __call__(self, t_run: np.ndarray) -> np.ndarray:
        """
        Return currents with shape (3,) + shape(t_run), rows U, V, W.
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Text description for logs."""
        ...
