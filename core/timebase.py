"""
Uniform sample grid for the transient window.

The window covers the dead time before connection plus ``view_cycles``
supply periods, sampled at a fixed number of points per period.
"""
from __future__ import annotations

import numpy as np

from .parameters import SimulationRequest


def sample_count(request: SimulationRequest) -> int:
    """floor(total / dt) + 1, total = stop time + view_cycles * T"""
    total = request.stop_time_s + request.view_cycles * request.period
    return int(np.floor(total / request.dt)) + 1


def make_time_grid(request: SimulationRequest) -> np.ndarray:
    """
    Absolute sample times t_i = i * dt, s.

    The last point may fall short of the window end; the grid is not
    stretched to hit it exactly so that the step stays uniform.
    """
    n = sample_count(request)
    return np.arange(n, dtype=float) * request.dt
