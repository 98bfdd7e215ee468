"""
Инфраструктурный слой контекста бронирования.

Содержит репозиторий бронирований поверх сохраняемой коллекции
и консольные заглушки внешних сервисов.
"""

import itertools
from typing import Dict, List, Optional

from ..shared_kernel import ConsoleLogger, EntityId, ILogger
from ..storage import IKeyValueStore, PersistedCollection
from . import interfaces as ports
from .domain import Booking, CheckoutReminder, latest_created

BOOKINGS_KEY = "bookings_v1"


class BookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований поверх сохраняемой коллекции.

    Фото и идентификатор напоминания меняются только через upsert
    измененной копии бронирования; URI фото не проверяются и не дедуплицируются.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        key: str = BOOKINGS_KEY,
        logger: Optional[ILogger] = None,
    ) -> None:
        self._logger = logger or ConsoleLogger()
        self._bookings = PersistedCollection(store, key, Booking, logger=self._logger)

    async def list_all(self) -> List[Booking]:
        return await self._bookings.load()

    async def get_by_id(self, booking_id: EntityId) -> Optional[Booking]:
        bookings = await self._bookings.load()
        return next((b for b in bookings if b.id == booking_id), None)

    async def upsert(self, booking: Booking) -> None:
        bookings = await self._bookings.load()
        for idx, existing in enumerate(bookings):
            if existing.id == booking.id:
                bookings[idx] = booking
                break
        else:
            bookings.append(booking)

        await self._bookings.save(bookings)
        self._logger.info(f"Booking {booking.id} saved", room_id=booking.room_id)

    async def delete(self, booking_id: EntityId) -> None:
        bookings = await self._bookings.load()
        remaining = [b for b in bookings if b.id != booking_id]
        if len(remaining) == len(bookings):
            return

        await self._bookings.save(remaining)
        self._logger.info(f"Booking {booking_id} deleted")

    async def list_for_room(self, room_id: EntityId) -> List[Booking]:
        bookings = await self._bookings.load()
        return [b for b in bookings if b.room_id == room_id]

    async def active_booking_for_room(self, room_id: EntityId) -> Optional[Booking]:
        return latest_created(await self.list_for_room(room_id))

    async def clear(self) -> None:
        await self._bookings.clear()


class ConsoleReminderScheduler(ports.IReminderScheduler):
    """Заглушка планировщика напоминаний, выводящая запросы в консоль."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._logger = logger or ConsoleLogger()
        self._counter = itertools.count(1)
        self.scheduled: Dict[str, CheckoutReminder] = {}

    async def schedule(self, reminder: CheckoutReminder) -> str:
        reminder_id = f"reminder-{next(self._counter)}"
        self.scheduled[reminder_id] = reminder
        self._logger.info(
            "Scheduling checkout reminder",
            reminder_id=reminder_id,
            booking_id=reminder.booking_id,
            trigger_at=reminder.trigger_at,
            title=reminder.title,
        )
        return reminder_id

    async def cancel(self, reminder_id: str) -> None:
        self.scheduled.pop(reminder_id, None)
        self._logger.info("Cancelling reminder", reminder_id=reminder_id)


class ConsoleMessageSender(ports.IMessageSender):
    """Заглушка сервиса SMS, выводящая сообщения в консоль."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._logger = logger or ConsoleLogger()
        self.sent: List[Dict[str, str]] = []

    async def send(self, to: str, body: str) -> bool:
        self._logger.info("Sending message", to=to, body=body)
        self.sent.append({"to": to, "body": body})
        return True
