"""
    Модуль core/state.py.
    Состав:
    Классы: Sample.
    Константы: индексы столбцов матрицы отсчётов.
"""
from __future__ import annotations

import numpy as np
from dataclasses import dataclass, fields


TIME_MS = 0
PHASE_U, PHASE_V, PHASE_W = 1, 2, 3
ENV_POS, ENV_NEG = 4, 5
DC_U = 6
RATED_PEAK = 7

SAMPLE_SIZE = 8


@dataclass(frozen=True)
class Sample:
    """Один отсчёт переходного процесса (значения уже округлены)"""

    time_ms: float
    phase_u: float
    phase_v: float
    phase_w: float
    envelope_positive: float
    envelope_negative: float
    dc_component_u: float
    rated_peak: float

    @classmethod
    def from_array(cls, row: np.ndarray) -> Sample:
        """Создает отсчёт из строки матрицы [SAMPLE_SIZE]."""

        return cls(
            time_ms=float(row[TIME_MS]),
            phase_u=float(row[PHASE_U]),
            phase_v=float(row[PHASE_V]),
            phase_w=float(row[PHASE_W]),
            envelope_positive=float(row[ENV_POS]),
            envelope_negative=float(row[ENV_NEG]),
            dc_component_u=float(row[DC_U]),
            rated_peak=float(row[RATED_PEAK]),
        )

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


SAMPLE_FIELDS = tuple(f.name for f in fields(Sample))
