"""
Общее ядро (Shared Kernel) для стойки регистрации отеля.

Содержит общие типы данных и утилиты, используемые номерами и бронированиями.
"""

from .domain import (
    BusinessRuleValidationException,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    MonotonicIdGenerator,
    generate_id,
    # Утилиты
    now,
)
from .infrastructure import ConsoleLogger
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "MonotonicIdGenerator",
    "generate_id",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    # Логирование
    "ILogger",
    "ConsoleLogger",
    # Утилиты
    "now",
]
