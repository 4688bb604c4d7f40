"""
Каталог типов электрических машин.

Статическая таблица: идентификатор типа -> электрические характеристики пуска.
Заполняется один раз при импорте и далее не изменяется
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import UnknownMotorType


class MotorCategory(Enum):
    """Класс машины"""
    INDUCTION = "induction"
    SYNCHRONOUS = "synchronous"


class RotorType(Enum):
    """Конструкция ротора (для внешнего рендеринга схем)"""
    CAGE = "cage"
    WOUND = "wound"
    SALIENT = "salient"
    CYLINDRICAL = "cylindrical"


@dataclass(frozen=True)
class MotorProfile:
    """Пусковые характеристики одного типа машины"""

    id: str
    category: MotorCategory
    inrush_multiplier: float    # Кратность пускового тока, Iп/Iн
    start_torque: float         # Кратность пускового момента, о.е.
    rotor_type: RotorType = RotorType.CAGE
    has_slip_rings: bool = False

    def __post_init__(self):
        if self.inrush_multiplier < 1.0:
            raise ValueError(
                f"{self.id}: inrush_multiplier must be >= 1, "
                f"got {self.inrush_multiplier}"
            )
        if self.start_torque < 0.0:
            raise ValueError(
                f"{self.id}: start_torque must be >= 0, got {self.start_torque}"
            )

    @property
    def is_synchronous(self) -> bool:
        return self.category is MotorCategory.SYNCHRONOUS

    def info(self) -> str:
        """Форматированная строка с параметрами типа"""
        lines = [
            f"  Тип: {self.id} ({self.category.value})",
            f"  Kip = {self.inrush_multiplier:g}, Kmp = {self.start_torque:g} о.е.",
            f"  Ротор: {self.rotor_type.value}, "
            f"контактные кольца: {'да' if self.has_slip_rings else 'нет'}",
        ]
        return "\n".join(lines)


_PROFILES = (
    MotorProfile(
        id="squirrelCage",
        category=MotorCategory.INDUCTION,
        inrush_multiplier=6.0,
        start_torque=1.5,
        rotor_type=RotorType.CAGE,
        has_slip_rings=False,
    ),
    MotorProfile(
        id="woundRotor",
        category=MotorCategory.INDUCTION,
        inrush_multiplier=3.0,
        start_torque=2.5,
        rotor_type=RotorType.WOUND,
        has_slip_rings=True,
    ),
    MotorProfile(
        id="salientPole",
        category=MotorCategory.SYNCHRONOUS,
        inrush_multiplier=5.0,
        start_torque=0.4,
        rotor_type=RotorType.SALIENT,
        has_slip_rings=True,
    ),
    MotorProfile(
        id="cylindrical",
        category=MotorCategory.SYNCHRONOUS,
        inrush_multiplier=5.0,
        start_torque=0.3,
        rotor_type=RotorType.CYLINDRICAL,
        has_slip_rings=True,
    ),
)

MOTOR_PROFILES = MappingProxyType({p.id: p for p in _PROFILES})


def motor_ids() -> tuple[str, ...]:
    """Идентификаторы в порядке каталога"""
    return tuple(MOTOR_PROFILES)


def lookup(motor_id: str) -> MotorProfile:
    """Найти профиль по идентификатору типа"""
    try:
        return MOTOR_PROFILES[motor_id]
    except (KeyError, TypeError):
        raise UnknownMotorType(motor_id, motor_ids()) from None


def describe_catalog() -> str:
    """Сравнительная таблица типов машин"""
    header = f"  {'Тип':<14}{'Класс':<13}{'Kip':>6}{'Kmp':>7}"
    lines = [header, "  " + "-" * (len(header) - 2)]
    for p in MOTOR_PROFILES.values():
        lines.append(
            f"  {p.id:<14}{p.category.value:<13}"
            f"{p.inrush_multiplier:>6g}{p.start_torque:>7g}"
        )
    return "\n".join(lines)
