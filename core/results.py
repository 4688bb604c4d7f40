"""
Контейнер результатов расчёта пускового тока.

Хранит временные ряды трёх фаз, огибающую, апериодическую составляющую
фазы U и сводные величины
"""
from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .parameters import SimulationRequest
from .state import (
    SAMPLE_FIELDS,
    SAMPLE_SIZE,
    TIME_MS, PHASE_U, PHASE_V, PHASE_W,
    ENV_POS, ENV_NEG, DC_U, RATED_PEAK,
    Sample,
)


@dataclass
class SimulationResult:
    """Результат одного расчёта"""

    #Время, мс
    time_ms: np.ndarray

    #Фазные токи, А
    phase_u: np.ndarray
    phase_v: np.ndarray
    phase_w: np.ndarray

    #Огибающая фазы U и апериодическая составляющая, А
    envelope_positive: np.ndarray
    envelope_negative: np.ndarray
    dc_component_u: np.ndarray

    #Линия номинальной амплитуды, А
    rated_peak_line: np.ndarray

    #Сводные величины
    rated_current_rms: float
    rated_peak: float
    inrush_peak: float
    observed_max_instantaneous: float
    stop_time_ms: float

    #Метаданные
    connection_index: int = 0
    motor_id: str = ""
    request: Optional[SimulationRequest] = None

    @classmethod
    def from_matrix(
        cls,
        m: np.ndarray,
        *,
        rated_current_rms: float,
        rated_peak: float,
        inrush_peak: float,
        observed_max_instantaneous: float,
        stop_time_ms: float,
        connection_index: int = 0,
        motor_id: str = "",
        request: Optional[SimulationRequest] = None,
    ) -> SimulationResult:
        """Создать из матрицы отсчётов (m shape = [8, N])"""
        if m.shape[0] != SAMPLE_SIZE:
            raise ValueError(
                f"sample matrix has {m.shape[0]} rows, expected {SAMPLE_SIZE}."
            )
        return cls(
            time_ms=m[TIME_MS],
            phase_u=m[PHASE_U], phase_v=m[PHASE_V], phase_w=m[PHASE_W],
            envelope_positive=m[ENV_POS], envelope_negative=m[ENV_NEG],
            dc_component_u=m[DC_U],
            rated_peak_line=m[RATED_PEAK],
            rated_current_rms=rated_current_rms,
            rated_peak=rated_peak,
            inrush_peak=inrush_peak,
            observed_max_instantaneous=observed_max_instantaneous,
            stop_time_ms=stop_time_ms,
            connection_index=connection_index,
            motor_id=motor_id,
            request=request,
        )

    @property
    def N(self) -> int:
        return len(self.time_ms)

    @property
    def peak_ratio(self) -> float:
        """Максимальный мгновенный ток в долях номинальной амплитуды"""
        return self.observed_max_instantaneous / self.rated_peak

    def matrix(self) -> np.ndarray:
        """Отсчёты в виде матрицы [8, N] в порядке полей Sample"""
        return np.vstack([
            self.time_ms,
            self.phase_u, self.phase_v, self.phase_w,
            self.envelope_positive, self.envelope_negative,
            self.dc_component_u,
            self.rated_peak_line,
        ])

    @property
    def samples(self) -> tuple[Sample, ...]:
        m = self.matrix()
        return tuple(Sample.from_array(m[:, k]) for k in range(self.N))

    def post_connection_slice(self) -> slice:
        """Срез отсчётов после включения"""
        return slice(self.connection_index, None)

    def to_records(self) -> list[dict[str, float]]:
        """Список словарей для внешнего рендеринга"""
        return [s.as_dict() for s in self.samples]

    def save_csv(self, csv_path: Path) -> None:
        csv_path = Path(csv_path)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with csv_path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=SAMPLE_FIELDS)
            writer.writeheader()
            for row in self.to_records():
                writer.writerow(row)

    def summary(self) -> str:
        """Краткая сводка результатов"""
        lines = [
            f"  Тип машины: {self.motor_id}",
            f"  Точек: {self.N}, t = [{self.time_ms[0]:.2f} .. {self.time_ms[-1]:.2f}] мс",
            f"  Включение: t = {self.stop_time_ms:g} мс",
            f"  Iн (действ.): {self.rated_current_rms:.1f} А",
            f"  Iн (ампл.): {self.rated_peak:.1f} А",
            f"  Iп (ампл.): {self.inrush_peak:.1f} А",
            f"  i_max (мгнов.): {self.observed_max_instantaneous:.1f} А",
            f"  i_max / Iн(ампл.): {self.peak_ratio:.1f}",
        ]
        return "\n".join(lines)
