"""
Проверка ссылочной целостности между номерами и бронированиями.

Бронирование ссылается на номер только по идентификатору, и удаление номера
не удаляет его бронирования. Здесь можно найти такие бронирования, чтобы
предупредить пользователя; сами данные не изменяются.
"""

from typing import List

from .booking.domain import Booking
from .booking.interfaces import IBookingRepository
from .rooms.interfaces import IRoomRepository


async def find_orphaned_bookings(
    rooms: IRoomRepository, bookings: IBookingRepository
) -> List[Booking]:
    """Возвращает бронирования, чей номер отсутствует в хранилище."""
    room_ids = {room.id for room in await rooms.list_all()}
    return [b for b in await bookings.list_all() if b.room_id not in room_ids]
