"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирования номеров, включая:
- Создание, изменение и удаление бронирований
- Выбор актуального бронирования номера
- Фото, напоминание о выезде и SMS с подтверждением
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
