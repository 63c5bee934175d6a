from abc import ABC, abstractmethod

from pydantic import BaseModel


class KeyPage(BaseModel):
    keys: list[str]
    cursor: str | None = None


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def put(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def list(self, prefix: str, cursor: str | None = None) -> KeyPage:
        """Return one page of keys starting with ``prefix``.

        ``cursor`` is None for the first page; a page without a cursor is the last one.
        """
