from typing import Any, Dict, Optional

from .booking.application import BookingApplicationService
from .booking.infrastructure import (
    BookingRepository,
    ConsoleMessageSender,
    ConsoleReminderScheduler,
)
from .booking.interfaces import IMessageSender, IReminderScheduler
from .config import Config
from .rooms.application import RoomApplicationService
from .rooms.infrastructure import RoomRepository
from .shared_kernel import ConsoleLogger, ILogger
from .storage import IKeyValueStore, JsonFileKeyValueStore


def bootstrap_app(
    config: Optional[Config] = None,
    store: Optional[IKeyValueStore] = None,
    reminders: Optional[IReminderScheduler] = None,
    messenger: Optional[IMessageSender] = None,
    logger: Optional[ILogger] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    config = config or Config()
    logger = logger or ConsoleLogger(config.LOG_LEVEL)

    # 1. Хранилище: по умолчанию JSON-файлы в каталоге данных
    store = store or JsonFileKeyValueStore(config.DATA_DIR)

    # 2. Репозитории поверх двух независимых коллекций
    rooms = RoomRepository(store, key=config.ROOMS_KEY, logger=logger)
    bookings = BookingRepository(store, key=config.BOOKINGS_KEY, logger=logger)

    # 3. Внешние сервисы
    reminders = reminders or ConsoleReminderScheduler(logger)
    messenger = messenger or ConsoleMessageSender(logger)

    # 4. Сервисы приложения
    room_service = RoomApplicationService(rooms, logger=logger)
    booking_service = BookingApplicationService(
        bookings,
        rooms,
        reminders,
        messenger,
        logger=logger,
        reminder_hour=config.REMINDER_HOUR,
        reminder_minute=config.REMINDER_MINUTE,
        currency=config.CURRENCY,
    )

    return {
        "store": store,
        "rooms": rooms,
        "bookings": bookings,
        "room_service": room_service,
        "booking_service": booking_service,
        "reminders": reminders,
        "messenger": messenger,
        "logger": logger,
    }
