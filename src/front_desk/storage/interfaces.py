"""
Интерфейсы (порты) слоя хранения.
"""

from typing import Optional, Protocol


class IKeyValueStore(Protocol):
    """Долговременное хранилище строковых значений по ключу.

    Запись значения по одному ключу считается атомарной: читатель видит либо
    старое, либо новое значение целиком.
    """

    async def get(self, key: str) -> Optional[str]: ...
    async def set(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> None: ...
