"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и описывает общие фикстуры.
"""
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Добавляем каталог с исходниками в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from front_desk.booking.application import BookingApplicationService  # noqa: E402
from front_desk.booking.infrastructure import (  # noqa: E402
    BookingRepository,
    ConsoleMessageSender,
    ConsoleReminderScheduler,
)
from front_desk.rooms.application import RoomApplicationService  # noqa: E402
from front_desk.rooms.infrastructure import RoomRepository  # noqa: E402
from front_desk.storage import InMemoryKeyValueStore  # noqa: E402

FIXED_NOW = datetime(2024, 5, 1, 12, 0)


class RecordingLogger:
    """Логгер, запоминающий сообщения для проверок в тестах."""

    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []

    def _log(self, level: str, message: str, context: Dict[str, Any]) -> None:
        self.records.append({"level": level, "message": message, **context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, kwargs)

    def levels(self) -> List[str]:
        return [r["level"] for r in self.records]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def room_repo(store, logger) -> RoomRepository:
    return RoomRepository(store, logger=logger)


@pytest.fixture
def booking_repo(store, logger) -> BookingRepository:
    return BookingRepository(store, logger=logger)


@pytest.fixture
def reminders(logger) -> ConsoleReminderScheduler:
    return ConsoleReminderScheduler(logger)


@pytest.fixture
def messenger(logger) -> ConsoleMessageSender:
    return ConsoleMessageSender(logger)


@pytest.fixture
def room_service(room_repo, logger) -> RoomApplicationService:
    return RoomApplicationService(room_repo, logger=logger)


@pytest.fixture
def booking_service(
    booking_repo, room_repo, reminders, messenger, logger
) -> BookingApplicationService:
    return BookingApplicationService(
        booking_repo,
        room_repo,
        reminders,
        messenger,
        logger=logger,
        currency="PLN",
        clock=lambda: FIXED_NOW,
    )
