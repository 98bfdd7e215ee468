"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import Booking, CheckoutReminder


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    async def list_all(self) -> List[Booking]: ...
    async def get_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    async def upsert(self, booking: Booking) -> None: ...
    async def delete(self, booking_id: EntityId) -> None: ...
    async def list_for_room(self, room_id: EntityId) -> List[Booking]: ...
    async def active_booking_for_room(self, room_id: EntityId) -> Optional[Booking]: ...
    async def clear(self) -> None: ...


class IReminderScheduler(Protocol):
    """Внешний сервис напоминаний (уведомления операционной системы)."""

    async def schedule(self, reminder: CheckoutReminder) -> str:
        """Планирует напоминание и возвращает его непрозрачный идентификатор."""
        ...

    async def cancel(self, reminder_id: str) -> None: ...


class IMessageSender(Protocol):
    """Внешний сервис отправки сообщений (SMS)."""

    async def send(self, to: str, body: str) -> bool:
        """Отправляет сообщение и возвращает True, если оно было отправлено."""
        ...
