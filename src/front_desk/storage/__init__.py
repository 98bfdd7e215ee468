"""
Слой хранения: порт хранилища ключ-значение и сохраняемые коллекции.
"""

from .infrastructure import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    PersistedCollection,
)
from .interfaces import IKeyValueStore

__all__ = [
    "IKeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "PersistedCollection",
]
