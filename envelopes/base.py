"""
Абстрактная огибающая амплитуды переменной составляющей тока
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class AmplitudeEnvelope(ABC):
    """Базовый класс огибающей"""

    @abstractmethod
    def __call__(self, t_run: np.ndarray) -> np.ndarray:
        """
        Амплитуда тока A(t_run), А.

        t_run отсчитывается от момента включения (t_run >= 0)
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Описание огибающей для логов"""
        ...
