"""
Доменная модель контекста бронирования.

Содержит бронирование, производный статус оплаты, правила проверки
и описание напоминания о выезде, которое планирует внешний сервис.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..shared_kernel import BusinessRuleValidationException, EntityId


class PaymentStatus(str, Enum):
    """Статус оплаты. Не хранится, а вычисляется по суммам."""

    NO_AMOUNT_DUE = "no_amount_due"
    UNPAID = "unpaid"
    PARTIAL = "partial"  # Внесен задаток
    FULLY_PAID = "fully_paid"


def classify_payment(total_amount: float, paid_amount: float) -> PaymentStatus:
    """Определяет статус оплаты по общей и внесенной суммам."""
    if total_amount == 0:
        return PaymentStatus.NO_AMOUNT_DUE
    if paid_amount <= 0:
        return PaymentStatus.UNPAID
    if paid_amount >= total_amount:
        return PaymentStatus.FULLY_PAID
    return PaymentStatus.PARTIAL


def _to_day(value: date) -> date:
    # Время суток не учитывается
    if isinstance(value, datetime):
        return value.date()
    return value


class Booking(BaseModel):
    """Бронирование номера.

    room_id - слабая ссылка на номер: существование номера не проверяется,
    а при удалении номера бронирование остается. checkout_notification_id -
    непрозрачный идентификатор напоминания, которым владеет внешний сервис.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: EntityId
    room_id: EntityId
    guest_name: str
    phone: Optional[str] = None
    check_in: date
    check_out: date
    total_amount: float
    paid_amount: float
    notes: Optional[str] = None
    photo_uris: List[str] = Field(default_factory=list)  # Новые фото - первыми
    checkout_notification_id: Optional[str] = None

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _take_calendar_day(cls, v: Any) -> Any:
        # Из строки берем только YYYY-MM-DD
        if isinstance(v, str):
            return v.strip()[:10]
        return _to_day(v)

    @field_validator("photo_uris", mode="before")
    @classmethod
    def _missing_photos_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days

    @property
    def payment_status(self) -> PaymentStatus:
        return classify_payment(self.total_amount, self.paid_amount)

    @property
    def has_checkout_reminder(self) -> bool:
        return self.checkout_notification_id is not None

    def with_photo(self, uri: str) -> Booking:
        """Возвращает копию с фото, добавленным в начало списка."""
        return self.model_copy(update={"photo_uris": [uri, *self.photo_uris]})

    def without_photo(self, uri: str) -> Booking:
        """Возвращает копию без указанного фото; порядок остальных сохраняется."""
        return self.model_copy(
            update={"photo_uris": [u for u in self.photo_uris if u != uri]}
        )

    def with_checkout_reminder(self, reminder_id: Optional[str]) -> Booking:
        return self.model_copy(update={"checkout_notification_id": reminder_id})


def latest_created(bookings: List[Booking]) -> Optional[Booking]:
    """Выбирает бронирование с наибольшим числовым идентификатором.

    Идентификатор - время создания, поэтому это самое новое бронирование,
    независимо от дат заезда и выезда.
    """
    if not bookings:
        return None
    return max(bookings, key=lambda b: _creation_order(b.id))


def _creation_order(booking_id: EntityId) -> int:
    try:
        return int(booking_id)
    except ValueError:
        # Нечисловые идентификаторы считаются самыми старыми
        return -1


class CheckoutReminder(BaseModel):
    """Запрос на напоминание о выезде, передаваемый внешнему планировщику."""

    model_config = ConfigDict(frozen=True)

    booking_id: EntityId
    room_number: str
    trigger_at: datetime
    title: str
    body: str

    @classmethod
    def for_checkout(
        cls,
        booking: Booking,
        room_number: str,
        hour: int = 10,
        minute: int = 0,
    ) -> CheckoutReminder:
        """Напоминание в день выезда в указанное время."""
        return cls(
            booking_id=booking.id,
            room_number=room_number,
            trigger_at=datetime.combine(booking.check_out, time(hour, minute)),
            title=f"Check-out: room {room_number}",
            body="Check-out is planned for today.",
        )


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def render_confirmation_message(
    booking: Booking, room_number: str, currency: str
) -> str:
    """Текст SMS с подтверждением бронирования."""
    return (
        f"Hello, we confirm your booking of room {room_number}. "
        f"Dates: {booking.check_in.isoformat()} - {booking.check_out.isoformat()}. "
        f"Amount: {_format_amount(booking.total_amount)} {currency}, "
        f"paid: {_format_amount(booking.paid_amount)} {currency}."
    )


class BookingPolicy:
    """Политики и бизнес-правила для бронирований."""

    @classmethod
    def validate_guest_name(cls, guest_name: str) -> str:
        """Проверяет имя гостя и возвращает его без пробелов по краям."""
        cleaned = guest_name.strip()
        if not cleaned:
            raise BusinessRuleValidationException("Укажите имя и фамилию гостя")
        return cleaned

    @classmethod
    def validate_dates(cls, check_in: date, check_out: date) -> None:
        """Дата выезда должна быть строго позже даты заезда (с точностью до дня)."""
        if _to_day(check_out) <= _to_day(check_in):
            raise BusinessRuleValidationException(
                "Дата выезда должна быть позже даты заезда"
            )

    @classmethod
    def validate_amounts(cls, total_amount: float, paid_amount: float) -> None:
        """Суммы конечны и неотрицательны, оплачено не больше общей суммы."""
        if not math.isfinite(total_amount) or total_amount < 0:
            raise BusinessRuleValidationException(
                "Общая сумма должна быть неотрицательным числом"
            )
        if not math.isfinite(paid_amount) or paid_amount < 0:
            raise BusinessRuleValidationException(
                "Оплаченная сумма должна быть неотрицательным числом"
            )
        if paid_amount > total_amount:
            raise BusinessRuleValidationException(
                "Оплаченная сумма не может превышать общую сумму"
            )

    @classmethod
    def validate_reminder_time(cls, trigger_at: datetime, current: datetime) -> None:
        """Напоминание можно запланировать только на будущее."""
        if trigger_at <= current:
            raise BusinessRuleValidationException(
                "Время напоминания уже прошло"
            )

    @classmethod
    def ensure_phone(cls, booking: Booking) -> str:
        if not booking.phone:
            raise BusinessRuleValidationException(
                "У бронирования нет номера телефона"
            )
        return booking.phone
