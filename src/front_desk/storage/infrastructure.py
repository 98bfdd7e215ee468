"""
Инфраструктурный слой хранения.

Содержит реализации хранилища ключ-значение и обобщенную коллекцию,
которая целиком загружается и целиком перезаписывается при каждом изменении.
"""

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..shared_kernel import ConsoleLogger, ILogger
from .interfaces import IKeyValueStore

T = TypeVar("T", bound=BaseModel)


class InMemoryKeyValueStore(IKeyValueStore):
    """Хранилище в памяти.

    Каждая операция уступает управление циклу событий, поэтому
    чередование конкурентных операций такое же, как у настоящего хранилища.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        await asyncio.sleep(0)
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        self._data[key] = value

    async def delete(self, key: str) -> None:
        await asyncio.sleep(0)
        self._data.pop(key, None)

    def raw(self, key: str) -> Optional[str]:
        """Возвращает сохраненное значение без обращения к циклу событий."""
        return self._data.get(key)


class JsonFileKeyValueStore(IKeyValueStore):
    """Хранилище, записывающее каждое значение в отдельный JSON-файл."""

    def __init__(self, directory: str) -> None:
        self._directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Недопустимый ключ хранилища: {key!r}")
        return self._directory / f"{key}.json"

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, self._path_for(key))

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, key, self._path_for(key), value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._remove, self._path_for(key))

    # Файловые операции выполняются в отдельном потоке

    def _read(self, path: Path) -> Optional[str]:
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def _write(self, key: str, path: Path, value: str) -> None:
        # Создаем директорию, если она не существует
        self._directory.mkdir(parents=True, exist_ok=True)

        # Пишем во временный файл и подменяем целевой одной операцией
        fd, tmp_name = tempfile.mkstemp(
            dir=self._directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _remove(self, path: Path) -> None:
        if path.exists():
            path.unlink()


class PersistedCollection(Generic[T]):
    """Упорядоченный список моделей, хранящийся под одним ключом.

    Поврежденные или отсутствующие данные трактуются как пустой список,
    чтобы приложение оставалось работоспособным.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        key: str,
        model_class: Type[T],
        logger: Optional[ILogger] = None,
    ) -> None:
        self._store = store
        self._key = key
        self._model_class = model_class
        self._adapter = TypeAdapter(List[model_class])  # type: ignore[valid-type]
        self._logger = logger or ConsoleLogger()

    @property
    def key(self) -> str:
        return self._key

    async def load(self) -> List[T]:
        """Загружает всю коллекцию."""
        try:
            raw = await self._store.get(self._key)
        except UnicodeDecodeError as e:
            return self._corrupt(reason=str(e))
        if raw is None or not raw.strip():
            return []

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            return self._corrupt(errors=e.error_count())

    def _corrupt(self, **context: Any) -> List[T]:
        self._logger.warning(
            f"Corrupt data under '{self._key}', treating as empty",
            model=self._model_class.__name__,
            **context,
        )
        return []

    async def save(self, items: Sequence[T]) -> None:
        """Сохраняет коллекцию целиком, заменяя предыдущее значение."""
        payload = self._adapter.dump_json(
            list(items), by_alias=True, exclude_none=True
        ).decode("utf-8")
        await self._store.set(self._key, payload)
        self._logger.debug(f"Saved {len(items)} item(s) under '{self._key}'")

    async def clear(self) -> None:
        """Удаляет коллекцию из хранилища."""
        await self._store.delete(self._key)
        self._logger.info(f"Cleared '{self._key}'")
