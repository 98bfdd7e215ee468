"""
Инфраструктурные компоненты общего ядра.
"""

import json
import sys
from typing import Any, Dict, TextIO

from .interfaces import ILogger

LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class ConsoleLogger(ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO") -> None:
        try:
            self._threshold = LOG_LEVELS[level.upper()]
        except KeyError:
            raise ValueError(f"Неизвестный уровень логирования: {level}")

    def _write(
        self, level: str, message: str, stream: TextIO, context: Dict[str, Any]
    ) -> None:
        if LOG_LEVELS[level] < self._threshold:
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._write("DEBUG", message, sys.stdout, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, sys.stdout, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, sys.stderr, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, sys.stderr, kwargs)
