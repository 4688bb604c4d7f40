"""
Параметры расчёта пускового тока.

Номинальные данные сети и двигателя, момент коммутации и окно наблюдения.
Фиксированные допущения модели заданы константами модуля
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np

from .errors import InvalidParameter


POWER_FACTOR = 0.85             # Принятый коэффициент мощности
TAU_AC_INDUCTION = 0.3          # Постоянная затухания огибающей, АД, с
TAU_AC_SYNCHRONOUS = 0.5        # Постоянная затухания огибающей, СД, с
SAMPLES_PER_CYCLE = 100         # Точек на период сети

RATED_VOLTAGES = (200.0, 400.0, 6600.0)
FREQUENCIES = (50.0, 60.0)

POWER_RANGE_KW = (0.75, 37.0)
DC_TIME_CONSTANT_RANGE_MS = (10.0, 200.0)
STOP_TIME_RANGE_MS = (0.0, 100.0)
VIEW_CYCLES_RANGE = (3, 30)


@dataclass(frozen=True)
class SimulationRequest:
    """Входные данные одного пересчёта"""

    rated_power_kw: float = 7.5         # Номинальная мощность, кВт
    rated_voltage_v: float = 200.0      # Номинальное линейное напряжение, В
    frequency_hz: float = 50.0          # Частота сети, Гц
    switching_angle_deg: float = 0.0    # Фаза напряжения в момент включения, град
    dc_time_constant_ms: float = 50.0   # Постоянная затухания апериодической составляющей, мс
    stop_time_ms: float = 50.0          # Пауза до включения, мс
    view_cycles: int = 10               # Число периодов после включения

    @property
    def omega(self) -> float:
        """Угловая частота сети, рад/с"""
        return 2 * np.pi * self.frequency_hz

    @property
    def period(self) -> float:
        """Период сети, с"""
        return 1.0 / self.frequency_hz

    @property
    def dt(self) -> float:
        """Шаг дискретизации, с"""
        return self.period / SAMPLES_PER_CYCLE

    @property
    def phi0(self) -> float:
        """Угол включения, рад"""
        return np.deg2rad(self.switching_angle_deg)

    @property
    def tau_dc(self) -> float:
        """Постоянная затухания апериодической составляющей, с"""
        return self.dc_time_constant_ms / 1000.0

    @property
    def stop_time_s(self) -> float:
        """Пауза до включения, с"""
        return self.stop_time_ms / 1000.0

    @property
    def dc_injection_hint(self) -> str:
        """Подсказка о величине апериодической составляющей фазы U"""
        if self.switching_angle_deg in (0, 180):
            return "minimum DC"
        if self.switching_angle_deg in (90, 270):
            return "maximum DC"
        return ""

    def validate(self) -> SimulationRequest:
        """Проверить все поля; первое нарушение -> InvalidParameter"""
        _check_range("rated_power_kw", self.rated_power_kw, *POWER_RANGE_KW)
        _check_choice("rated_voltage_v", self.rated_voltage_v, RATED_VOLTAGES)
        _check_choice("frequency_hz", self.frequency_hz, FREQUENCIES)

        angle = self.switching_angle_deg
        _check_real("switching_angle_deg", angle)
        if not 0.0 <= angle < 360.0:
            raise InvalidParameter(
                "switching_angle_deg", angle, "must be in [0, 360)"
            )

        _check_range(
            "dc_time_constant_ms", self.dc_time_constant_ms,
            *DC_TIME_CONSTANT_RANGE_MS,
        )
        _check_range("stop_time_ms", self.stop_time_ms, *STOP_TIME_RANGE_MS)

        cycles = self.view_cycles
        if isinstance(cycles, bool) or not isinstance(cycles, numbers.Integral):
            raise InvalidParameter("view_cycles", cycles, "must be an integer")
        _check_range("view_cycles", cycles, *VIEW_CYCLES_RANGE)
        return self

    def info(self) -> str:
        """Форматированная строка с параметрами расчёта"""
        hint = self.dc_injection_hint
        lines = [
            f"  P2н = {self.rated_power_kw:g} кВт, Uн = {self.rated_voltage_v:g} В, "
            f"f = {self.frequency_hz:g} Гц",
            f"  phi_0 = {self.switching_angle_deg:g} град"
            + (f" ({hint})" if hint else ""),
            f"  tau_DC = {self.dc_time_constant_ms:g} мс, "
            f"пауза = {self.stop_time_ms:g} мс, периодов = {self.view_cycles}",
        ]
        return "\n".join(lines)


def _check_real(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(name, value, "must be a real number")


def _check_range(name: str, value, lo: float, hi: float) -> None:
    _check_real(name, value)
    # NaN fails both comparisons
    if not lo <= value <= hi:
        raise InvalidParameter(name, value, f"must be in [{lo:g}, {hi:g}]")


def _check_choice(name: str, value, choices: tuple[float, ...]) -> None:
    _check_real(name, value)
    if value not in choices:
        allowed = ", ".join(f"{c:g}" for c in choices)
        raise InvalidParameter(name, value, f"must be one of {{{allowed}}}")
