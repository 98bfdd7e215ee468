"""
Доменная модель контекста номеров.

Номер отеля, его статус и правила, которые проверяются
перед сохранением изменений.
"""

import math
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..shared_kernel import BusinessRuleValidationException, EntityId


class RoomStatus(str, Enum):
    """Статусы номера.

    Переходы не ограничены: любой статус достижим из любого,
    и меняется он только явным действием пользователя.
    """

    FREE = "FREE"  # Свободен
    OCCUPIED = "OCCUPIED"  # Занят
    CLEANING = "CLEANING"  # Требует уборки


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: EntityId
    number: str  # Отображаемый номер комнаты (например, "101", "2A")
    capacity: int
    price_per_night: float
    status: RoomStatus = RoomStatus.FREE


def normalize_room_number(number: str) -> str:
    """Приводит номер комнаты к виду, в котором сравнивается уникальность."""
    return number.strip().lower()


class RoomPolicy:
    """Политики и бизнес-правила для номеров."""

    @classmethod
    def validate_number(cls, number: str) -> str:
        """Проверяет номер комнаты и возвращает его без пробелов по краям."""
        cleaned = number.strip()
        if not cleaned:
            raise BusinessRuleValidationException("Укажите номер комнаты")
        return cleaned

    @classmethod
    def validate_capacity(cls, capacity: int) -> None:
        """Вместимость - целое число больше нуля."""
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise BusinessRuleValidationException(
                "Вместимость номера должна быть целым числом"
            )
        if capacity <= 0:
            raise BusinessRuleValidationException(
                "Вместимость номера должна быть больше нуля"
            )

    @classmethod
    def validate_price(cls, price_per_night: float) -> None:
        """Цена за ночь - конечное неотрицательное число."""
        if not math.isfinite(price_per_night) or price_per_night < 0:
            raise BusinessRuleValidationException(
                "Цена за ночь не может быть отрицательной"
            )

    @classmethod
    def ensure_number_is_free(cls, number: str, taken: bool) -> None:
        if taken:
            raise BusinessRuleValidationException(
                f"Номер комнаты {number} уже существует"
            )


STARTER_ROOMS: List[Room] = [
    Room(id="1", number="1", capacity=2, price_per_night=150, status=RoomStatus.FREE),
    Room(id="2", number="2", capacity=3, price_per_night=180, status=RoomStatus.FREE),
    Room(
        id="3", number="3", capacity=1, price_per_night=120, status=RoomStatus.CLEANING
    ),
    Room(
        id="4", number="4", capacity=2, price_per_night=160, status=RoomStatus.OCCUPIED
    ),
    Room(id="5", number="5", capacity=4, price_per_night=220, status=RoomStatus.FREE),
]
