"""
Интерфейсы (порты) для контекста номеров.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import Room, RoomStatus


class IRoomRepository(Protocol):
    """Интерфейс репозитория для номеров.

    Уникальность номера комнаты репозиторий не проверяет: вызывающий код
    обязан спросить is_number_taken перед созданием или переименованием.
    """

    async def list_all(self) -> List[Room]: ...
    async def get_by_id(self, room_id: EntityId) -> Optional[Room]: ...
    async def upsert(self, room: Room) -> None: ...
    async def delete(self, room_id: EntityId) -> None: ...
    async def is_number_taken(
        self, number: str, exclude_id: Optional[EntityId] = None
    ) -> bool: ...
    async def update_status(self, room_id: EntityId, status: RoomStatus) -> None: ...
    async def seed_if_empty(self) -> List[Room]: ...
    async def clear(self) -> None: ...
