"""
Абстрактный сценарий пуска.

Сценарий определяет:
  - тип машины из каталога
  - параметры расчёта (сеть, момент включения, окно наблюдения)
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from core.parameters import SimulationRequest


class Scenario(ABC):
    """Базовый класс сценария"""

    @abstractmethod
    def name(self) -> str:
        """Имя сценария для логов и графиков"""
        ...

    @abstractmethod
    def motor_id(self) -> str:
        """Идентификатор типа машины в каталоге"""
        ...

    @abstractmethod
    def request(self) -> SimulationRequest:
        """Параметры расчёта"""
        ...

    def describe(self) -> str:
        """Подробное описание сценария"""
        return self.name()
