"""
Модуль контекста номеров (Rooms Context).

Отвечает за учет номеров отеля: создание, изменение, удаление
и ручное переключение статуса (свободен, занят, уборка).
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
