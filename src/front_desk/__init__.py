"""
Стойка регистрации небольшого отеля.

Номера, их статусы и бронирования гостей, хранящиеся локально,
а также координация напоминаний о выезде, фото и SMS вокруг бронирования.
"""

from . import booking, rooms, shared_kernel, storage

__all__ = [
    "shared_kernel",
    "storage",
    "rooms",
    "booking",
]
