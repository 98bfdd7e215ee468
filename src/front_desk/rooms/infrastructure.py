"""
Инфраструктурный слой контекста номеров.

Репозиторий загружает всю коллекцию, изменяет ее в памяти
и сохраняет целиком. Блокировок нет: вызывающий код должен дождаться
завершения одной операции записи, прежде чем начинать следующую.
"""

from typing import List, Optional

from ..shared_kernel import ConsoleLogger, EntityId, ILogger
from ..storage import IKeyValueStore, PersistedCollection
from . import interfaces as ports
from .domain import STARTER_ROOMS, Room, RoomStatus, normalize_room_number

ROOMS_KEY = "rooms_v1"


class RoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров поверх сохраняемой коллекции."""

    def __init__(
        self,
        store: IKeyValueStore,
        key: str = ROOMS_KEY,
        logger: Optional[ILogger] = None,
    ) -> None:
        self._logger = logger or ConsoleLogger()
        self._rooms = PersistedCollection(store, key, Room, logger=self._logger)

    async def list_all(self) -> List[Room]:
        return await self._rooms.load()

    async def get_by_id(self, room_id: EntityId) -> Optional[Room]:
        rooms = await self._rooms.load()
        return next((r for r in rooms if r.id == room_id), None)

    async def upsert(self, room: Room) -> None:
        rooms = await self._rooms.load()
        for idx, existing in enumerate(rooms):
            if existing.id == room.id:
                rooms[idx] = room
                break
        else:
            rooms.append(room)

        await self._rooms.save(rooms)
        self._logger.info(f"Room {room.id} saved", number=room.number)

    async def delete(self, room_id: EntityId) -> None:
        rooms = await self._rooms.load()
        remaining = [r for r in rooms if r.id != room_id]
        if len(remaining) == len(rooms):
            return

        # Бронирования этого номера не удаляются и становятся "осиротевшими"
        await self._rooms.save(remaining)
        self._logger.info(f"Room {room_id} deleted")

    async def is_number_taken(
        self, number: str, exclude_id: Optional[EntityId] = None
    ) -> bool:
        normalized = normalize_room_number(number)
        rooms = await self._rooms.load()
        return any(
            normalize_room_number(r.number) == normalized
            and (exclude_id is None or r.id != exclude_id)
            for r in rooms
        )

    async def update_status(self, room_id: EntityId, status: RoomStatus) -> None:
        rooms = await self._rooms.load()
        for idx, existing in enumerate(rooms):
            if existing.id == room_id:
                rooms[idx] = existing.model_copy(update={"status": status})
                break
        else:
            # Номер не найден - молча ничего не делаем
            self._logger.debug(f"Room {room_id} not found, status unchanged")
            return

        await self._rooms.save(rooms)
        self._logger.info(f"Room {room_id} status changed", status=status.value)

    async def seed_if_empty(self) -> List[Room]:
        current = await self._rooms.load()
        if current:
            return current

        seeded = [room.model_copy() for room in STARTER_ROOMS]
        await self._rooms.save(seeded)
        self._logger.info(f"Seeded {len(seeded)} starter rooms")
        return seeded

    async def clear(self) -> None:
        await self._rooms.clear()
