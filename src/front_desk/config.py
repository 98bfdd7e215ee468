import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # ------------------------
    # Storage
    # ------------------------
    DATA_DIR = os.getenv("FRONT_DESK_DATA_DIR", "data")
    ROOMS_KEY = os.getenv("FRONT_DESK_ROOMS_KEY", "rooms_v1")
    BOOKINGS_KEY = os.getenv("FRONT_DESK_BOOKINGS_KEY", "bookings_v1")

    # ------------------------
    # Checkout reminder (local time on the check-out day)
    # ------------------------
    REMINDER_HOUR = int(os.getenv("FRONT_DESK_REMINDER_HOUR", "10"))
    REMINDER_MINUTE = int(os.getenv("FRONT_DESK_REMINDER_MINUTE", "0"))

    # ------------------------
    # Messages
    # ------------------------
    CURRENCY = os.getenv("FRONT_DESK_CURRENCY", "PLN")

    # ------------------------
    # Logging
    # ------------------------
    LOG_LEVEL = os.getenv("FRONT_DESK_LOG_LEVEL", "INFO").upper()
