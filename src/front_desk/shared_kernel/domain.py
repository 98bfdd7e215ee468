"""
Основные доменные типы и утилиты общего ядра.
"""

import threading
import time
from datetime import datetime

# Идентификаторы сущностей - непрозрачные строки
EntityId = str


class MonotonicIdGenerator:
    """Генератор идентификаторов на основе времени создания (в миллисекундах).

    Идентификаторы строго возрастают в пределах процесса: если два запроса
    пришлись на одну миллисекунду, второй получает значение на единицу больше.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> EntityId:
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


generate_id = MonotonicIdGenerator()


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


# Общие утилиты
def now() -> datetime:
    """Возвращает текущие локальные дату и время."""
    return datetime.now()
