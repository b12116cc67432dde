"""
Testes Unitários para ReadWriteLock.
"""

import asyncio

import pytest

from src.core.shared.locks import ReadWriteLock


class TestReadWriteLock:
    """Testes de exclusão mútua e liberação."""

    @pytest.mark.asyncio
    async def test_leitores_simultaneos(self):
        """Vários leitores podem segurar o lock ao mesmo tempo."""
        lock = ReadWriteLock()

        async with lock.read():
            async with lock.read():
                assert lock.readers == 2

        assert lock.readers == 0

    @pytest.mark.asyncio
    async def test_escritor_espera_leitor(self):
        lock = ReadWriteLock()
        events = []

        async def writer():
            async with lock.write():
                events.append("write")

        async with lock.read():
            task = asyncio.create_task(writer())
            await asyncio.sleep(0)
            events.append("read-done")

        await task
        assert events == ["read-done", "write"]

    @pytest.mark.asyncio
    async def test_escritor_aguardando_bloqueia_novos_leitores(self):
        """Com escritor na fila, novo leitor entra só depois dele."""
        lock = ReadWriteLock()
        events = []

        async def writer():
            async with lock.write():
                events.append("write")

        async def late_reader():
            async with lock.read():
                events.append("late-read")

        async with lock.read():
            writer_task = asyncio.create_task(writer())
            await asyncio.sleep(0)
            reader_task = asyncio.create_task(late_reader())
            await asyncio.sleep(0)
            assert events == []

        await asyncio.gather(writer_task, reader_task)
        assert events == ["write", "late-read"]

    @pytest.mark.asyncio
    async def test_lock_liberado_em_excecao(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            async with lock.write():
                raise RuntimeError("falha")

        assert lock.writer_active is False

        async with lock.read():
            assert lock.readers == 1

    @pytest.mark.asyncio
    async def test_escritor_cancelado_libera_leitores(self):
        lock = ReadWriteLock()
        events = []

        async def late_reader():
            async with lock.read():
                events.append("late-read")

        await lock.acquire_read()
        writer_task = asyncio.create_task(lock.acquire_write())
        await asyncio.sleep(0)
        reader_task = asyncio.create_task(late_reader())
        await asyncio.sleep(0)

        writer_task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await writer_task

        await reader_task
        await lock.release_read()

        assert events == ["late-read"]
        assert lock.writer_active is False

    @pytest.mark.asyncio
    async def test_leitor_cancelado_durante_liberacao(self):
        """Cancelar a liberação não deixa o contador de leitores preso."""
        lock = ReadWriteLock()
        release = asyncio.Event()

        async def reader():
            async with lock.read():
                await release.wait()

        first = asyncio.create_task(reader())
        second = asyncio.create_task(reader())
        for _ in range(5):
            await asyncio.sleep(0)
        assert lock.readers == 2

        # segura a condição: as liberações ficam aguardando o lock interno
        await lock._condition.acquire()
        release.set()
        for _ in range(5):
            await asyncio.sleep(0)
        second.cancel()
        lock._condition.release()

        await asyncio.gather(first, second, return_exceptions=True)

        assert second.cancelled()
        assert lock.readers == 0
        await asyncio.wait_for(lock.acquire_write(), timeout=0.5)
        assert lock.writer_active is True

    @pytest.mark.asyncio
    async def test_escritor_cancelado_durante_liberacao(self):
        lock = ReadWriteLock()
        release = asyncio.Event()
        events = []

        async def writer():
            async with lock.write():
                await release.wait()

        async def reader():
            async with lock.read():
                events.append("read")

        writer_task = asyncio.create_task(writer())
        await asyncio.sleep(0)
        reader_task = asyncio.create_task(reader())
        await asyncio.sleep(0)
        assert lock.writer_active is True

        await lock._condition.acquire()
        release.set()
        for _ in range(5):
            await asyncio.sleep(0)
        writer_task.cancel()
        lock._condition.release()

        await asyncio.gather(writer_task, return_exceptions=True)

        assert lock.writer_active is False
        await asyncio.wait_for(reader_task, timeout=0.5)
        assert events == ["read"]
