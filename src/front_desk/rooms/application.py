"""
Прикладной слой контекста номеров.

Сервис приложения проверяет бизнес-правила до записи:
если проверка не прошла, коллекция не сохраняется.
"""

from typing import List, Optional

from ..shared_kernel import ConsoleLogger, EntityId, ILogger, generate_id
from . import interfaces as ports
from .domain import Room, RoomPolicy, RoomStatus


class RoomApplicationService:
    """Сервис приложения для работы с номерами."""

    def __init__(
        self, rooms: ports.IRoomRepository, logger: Optional[ILogger] = None
    ) -> None:
        self._rooms = rooms
        self._logger = logger or ConsoleLogger()

    async def list_rooms(self) -> List[Room]:
        """Возвращает все номера, при первом запуске заполняя стартовый набор."""
        return await self._rooms.seed_if_empty()

    async def get_room(self, room_id: EntityId) -> Optional[Room]:
        return await self._rooms.get_by_id(room_id)

    async def _validate(
        self,
        number: str,
        capacity: int,
        price_per_night: float,
        exclude_id: Optional[EntityId] = None,
    ) -> str:
        cleaned = RoomPolicy.validate_number(number)
        RoomPolicy.validate_capacity(capacity)
        RoomPolicy.validate_price(price_per_night)
        taken = await self._rooms.is_number_taken(cleaned, exclude_id=exclude_id)
        RoomPolicy.ensure_number_is_free(cleaned, taken)
        return cleaned

    async def create_room(
        self, number: str, capacity: int, price_per_night: float
    ) -> Room:
        """Создает новый свободный номер."""
        cleaned = await self._validate(number, capacity, price_per_night)

        room = Room(
            id=generate_id(),
            number=cleaned,
            capacity=capacity,
            price_per_night=price_per_night,
            status=RoomStatus.FREE,
        )
        await self._rooms.upsert(room)
        return room

    async def update_room(
        self,
        room_id: EntityId,
        number: str,
        capacity: int,
        price_per_night: float,
    ) -> Optional[Room]:
        """Изменяет номер, вместимость и цену; статус не сбрасывается."""
        existing = await self._rooms.get_by_id(room_id)
        if existing is None:
            self._logger.warning(f"Room {room_id} not found, nothing to update")
            return None

        cleaned = await self._validate(
            number, capacity, price_per_night, exclude_id=room_id
        )

        room = existing.model_copy(
            update={
                "number": cleaned,
                "capacity": capacity,
                "price_per_night": float(price_per_night),
            }
        )
        await self._rooms.upsert(room)
        return room

    async def change_status(self, room_id: EntityId, status: RoomStatus) -> None:
        await self._rooms.update_status(room_id, status)

    async def delete_room(self, room_id: EntityId) -> None:
        """Удаляет номер. Его бронирования остаются в хранилище."""
        await self._rooms.delete(room_id)
