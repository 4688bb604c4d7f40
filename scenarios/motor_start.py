"""
Сценарий: прямой пуск двигателя от сети.
"""
from __future__ import annotations

from dataclasses import replace

from core.parameters import SimulationRequest
from .base import Scenario


class DirectOnLineStartScenario(Scenario):
    """
    Прямой пуск: после паузы stop_time_ms двигатель включается на
    номинальное напряжение при заданном угле коммутации.

    Без аргументов воспроизводит исходное состояние симулятора
    (короткозамкнутый АД 7.5 кВт, 200 В, 50 Гц, 0 град)
    """

    def __init__(self, motor_id: str = "squirrelCage", **request_fields):
        self._motor_id = motor_id
        self._request = replace(SimulationRequest(), **request_fields)

    def name(self) -> str:
        return "ПРЯМОЙ ПУСК"

    def motor_id(self) -> str:
        return self._motor_id

    def request(self) -> SimulationRequest:
        return self._request

    def describe(self) -> str:
        r = self._request
        return (
            f"{self.name()} [{self._motor_id}]: "
            f"P={r.rated_power_kw:g} кВт, U={r.rated_voltage_v:g} В, "
            f"phi_0={r.switching_angle_deg:g} град"
        )
