"""
Прикладной слой контекста бронирования.

Сервис приложения координирует жизненный цикл бронирования:
проверку правил, фото, напоминание о выезде и SMS с подтверждением.
"""

from datetime import date, datetime
from typing import Callable, List, Optional

from ..rooms.interfaces import IRoomRepository
from ..shared_kernel import ConsoleLogger, EntityId, ILogger, generate_id, now
from . import interfaces as ports
from .domain import (
    Booking,
    BookingPolicy,
    CheckoutReminder,
    PaymentStatus,
    classify_payment,
    render_confirmation_message,
)


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


class BookingApplicationService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        bookings: ports.IBookingRepository,
        rooms: IRoomRepository,
        reminders: ports.IReminderScheduler,
        messenger: ports.IMessageSender,
        logger: Optional[ILogger] = None,
        reminder_hour: int = 10,
        reminder_minute: int = 0,
        currency: str = "PLN",
        clock: Callable[[], datetime] = now,
    ) -> None:
        self._bookings = bookings
        self._rooms = rooms
        self._reminders = reminders
        self._messenger = messenger
        self._logger = logger or ConsoleLogger()
        self._reminder_hour = reminder_hour
        self._reminder_minute = reminder_minute
        self._currency = currency
        self._clock = clock

    # Чтение

    async def get_booking(self, booking_id: EntityId) -> Optional[Booking]:
        return await self._bookings.get_by_id(booking_id)

    async def list_bookings(self) -> List[Booking]:
        return await self._bookings.list_all()

    async def list_room_bookings(self, room_id: EntityId) -> List[Booking]:
        return await self._bookings.list_for_room(room_id)

    async def get_active_booking(self, room_id: EntityId) -> Optional[Booking]:
        """Самое новое бронирование номера (не обязательно на сегодня)."""
        return await self._bookings.active_booking_for_room(room_id)

    @staticmethod
    def payment_status(booking: Booking) -> PaymentStatus:
        return classify_payment(booking.total_amount, booking.paid_amount)

    # Создание и изменение

    def _validate(
        self,
        guest_name: str,
        check_in: date,
        check_out: date,
        total_amount: float,
        paid_amount: float,
    ) -> str:
        name = BookingPolicy.validate_guest_name(guest_name)
        BookingPolicy.validate_dates(check_in, check_out)
        BookingPolicy.validate_amounts(total_amount, paid_amount)
        return name

    async def create_booking(
        self,
        room_id: EntityId,
        guest_name: str,
        check_in: date,
        check_out: date,
        total_amount: float,
        paid_amount: float,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Booking:
        """Создает бронирование с пустым списком фото."""
        name = self._validate(guest_name, check_in, check_out, total_amount, paid_amount)

        booking = Booking(
            id=generate_id(),
            room_id=room_id,
            guest_name=name,
            phone=_optional_text(phone),
            check_in=check_in,
            check_out=check_out,
            total_amount=total_amount,
            paid_amount=paid_amount,
            notes=_optional_text(notes),
            photo_uris=[],
        )
        await self._bookings.upsert(booking)
        return booking

    async def update_booking(
        self,
        booking_id: EntityId,
        guest_name: str,
        check_in: date,
        check_out: date,
        total_amount: float,
        paid_amount: float,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[Booking]:
        """Изменяет данные бронирования, сохраняя фото и напоминание."""
        existing = await self._bookings.get_by_id(booking_id)
        if existing is None:
            self._logger.warning(f"Booking {booking_id} not found, nothing to update")
            return None

        name = self._validate(guest_name, check_in, check_out, total_amount, paid_amount)

        booking = Booking(
            id=existing.id,
            room_id=existing.room_id,
            guest_name=name,
            phone=_optional_text(phone),
            check_in=check_in,
            check_out=check_out,
            total_amount=total_amount,
            paid_amount=paid_amount,
            notes=_optional_text(notes),
            photo_uris=list(existing.photo_uris),
            checkout_notification_id=existing.checkout_notification_id,
        )
        await self._bookings.upsert(booking)
        return booking

    # Фото

    async def add_photo(self, booking_id: EntityId, uri: str) -> Optional[Booking]:
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None:
            self._logger.warning(f"Booking {booking_id} not found, photo not added")
            return None

        updated = booking.with_photo(uri)
        await self._bookings.upsert(updated)
        return updated

    async def remove_photo(self, booking_id: EntityId, uri: str) -> Optional[Booking]:
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None:
            return None

        updated = booking.without_photo(uri)
        await self._bookings.upsert(updated)
        return updated

    # Напоминание о выезде

    async def schedule_checkout_reminder(
        self, booking_id: EntityId
    ) -> Optional[Booking]:
        """Планирует напоминание в день выезда, заменяя ранее заданное."""
        booking = await self._bookings.get_by_id(booking_id)
        room = await self._rooms.get_by_id(booking.room_id) if booking else None
        if booking is None or room is None:
            self._logger.warning(
                "Cannot schedule reminder without booking and room",
                booking_id=booking_id,
            )
            return None

        reminder = CheckoutReminder.for_checkout(
            booking,
            room_number=room.number,
            hour=self._reminder_hour,
            minute=self._reminder_minute,
        )
        BookingPolicy.validate_reminder_time(reminder.trigger_at, self._clock())

        replaced = booking.has_checkout_reminder
        if replaced:
            await self._reminders.cancel(booking.checkout_notification_id)
            booking = booking.with_checkout_reminder(None)

        try:
            reminder_id = await self._reminders.schedule(reminder)
        except Exception:
            # Старое напоминание уже отменено, его идентификатор не храним
            if replaced:
                await self._bookings.upsert(booking)
            raise
        updated = booking.with_checkout_reminder(reminder_id)
        await self._bookings.upsert(updated)
        return updated

    async def cancel_checkout_reminder(
        self, booking_id: EntityId
    ) -> Optional[Booking]:
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None or not booking.checkout_notification_id:
            return booking

        await self._reminders.cancel(booking.checkout_notification_id)
        updated = booking.with_checkout_reminder(None)
        await self._bookings.upsert(updated)
        return updated

    # Удаление

    async def delete_booking(self, booking_id: EntityId) -> bool:
        """Удаляет бронирование, предварительно отменяя его напоминание.

        Ошибка отмены напоминания не мешает удалению.
        """
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None:
            return False

        if booking.checkout_notification_id:
            try:
                await self._reminders.cancel(booking.checkout_notification_id)
            except Exception as e:
                self._logger.error(
                    "Reminder cancellation failed, deleting booking anyway",
                    booking_id=booking_id,
                    reminder_id=booking.checkout_notification_id,
                    error=str(e),
                )

        await self._bookings.delete(booking_id)
        return True

    # Сообщения

    async def send_confirmation_message(self, booking_id: EntityId) -> bool:
        """Отправляет гостю SMS с подтверждением. Повторных попыток нет."""
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None:
            self._logger.warning(f"Booking {booking_id} not found, message not sent")
            return False

        phone = BookingPolicy.ensure_phone(booking)
        room = await self._rooms.get_by_id(booking.room_id)
        body = render_confirmation_message(
            booking, room.number if room else "", self._currency
        )

        sent = await self._messenger.send(phone, body)
        if not sent:
            self._logger.warning("Message was not sent", booking_id=booking_id)
        return sent
