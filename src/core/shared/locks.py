"""
Lock de leitura/escrita para asyncio.

Permite vários leitores simultâneos ou um único escritor. Assim que um
escritor está aguardando, novos leitores esperam, evitando que leituras
contínuas impeçam escritas indefinidamente.

Example:
    lock = ReadWriteLock()

    async with lock.read():
        snapshot = dict(store)

    async with lock.write():
        store[key] = value
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Lock compartilhado (leitura) / exclusivo (escrita)."""

    def __init__(self):
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        """Número de leitores ativos."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer_active

    async def acquire_read(self) -> None:
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        # contador alterado antes de qualquer await: cancelamento não vaza o lock
        self._readers -= 1
        if self._readers == 0:
            await asyncio.shield(self._notify_all())

    async def acquire_write(self) -> None:
        async with self._condition:
            self._writers_waiting += 1
            try:
                await self._condition.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            except BaseException:
                # leitores bloqueados por este escritor podem prosseguir
                self._writers_waiting -= 1
                self._condition.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True

    async def release_write(self) -> None:
        self._writer_active = False
        await asyncio.shield(self._notify_all())

    async def _notify_all(self) -> None:
        async with self._condition:
            self._condition.notify_all()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Acesso compartilhado; liberado em qualquer caminho de saída."""
        await self.acquire_read()
        try:
            yield
        finally:
            await self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Acesso exclusivo; liberado em qualquer caminho de saída."""
        await self.acquire_write()
        try:
            yield
        finally:
            await self.release_write()
