"""
Persistence tests

Loading falls back to a default snapshot; saving is fire-and-forget and
never reverses or blocks a store update.
"""

import asyncio
import logging
import time

import pytest

from statewire.core import CounterModel, ObservableStore
from statewire.persistence import (
    ChangePersister,
    CounterDatabaseBackend,
    DatabaseAccess,
    MemoryBackend,
    ModelPersistenceBackend,
    PersistenceError,
    load_or_default,
)


class FailingBackend(ModelPersistenceBackend[CounterModel]):
    def __init__(self):
        self.save_attempts = 0

    async def load(self) -> CounterModel:
        raise PersistenceError("database unavailable")

    async def save(self, model: CounterModel) -> None:
        self.save_attempts += 1
        raise PersistenceError("database unavailable")


class SlowBackend(MemoryBackend):
    async def save(self, model) -> None:
        await asyncio.sleep(0.05)
        await super().save(model)


class FirstSaveSlowBackend(MemoryBackend):
    async def save(self, model) -> None:
        if model.counter == 1:
            await asyncio.sleep(0.05)
        await super().save(model)


class FirstSaveFailingBackend(MemoryBackend):
    async def save(self, model) -> None:
        if model.counter == 1:
            raise PersistenceError("database unavailable")
        await super().save(model)


class TestDatabaseStub:
    @pytest.mark.asyncio
    async def test_load_returns_zero_after_delay(self):
        db = DatabaseAccess(delay=0.05)
        started = time.monotonic()
        assert await db.load_counter() == 0
        assert time.monotonic() - started >= 0.04

    @pytest.mark.asyncio
    async def test_backend_maps_to_counter_model(self):
        backend = CounterDatabaseBackend(DatabaseAccess(delay=0))
        assert await backend.load() == CounterModel(counter=0)
        await backend.save(CounterModel(counter=3))


class TestLoad:
    @pytest.mark.asyncio
    async def test_loads_backend_value(self):
        backend = MemoryBackend(CounterModel(counter=9))
        assert await load_or_default(backend, CounterModel()) == CounterModel(counter=9)

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_default(self, caplog):
        with caplog.at_level(logging.ERROR):
            model = await load_or_default(FailingBackend(), CounterModel(counter=-1))
        assert model == CounterModel(counter=-1)
        assert "load failed" in caplog.text


class TestChangePersister:
    @pytest.mark.asyncio
    async def test_every_change_is_saved(self):
        backend = MemoryBackend(CounterModel())
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)

        store.replace(CounterModel(counter=1))
        store.replace(CounterModel(counter=2))
        await persister.drain()

        assert [m.counter for m in backend.history] == [1, 2]
        assert backend.last_saved == CounterModel(counter=2)

    @pytest.mark.asyncio
    async def test_replace_does_not_wait_for_save(self):
        backend = SlowBackend(CounterModel())
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)

        store.replace(CounterModel(counter=1))
        assert store.current().counter == 1
        assert persister.pending == 1
        assert backend.history == []

        await persister.drain()
        assert persister.pending == 0
        assert backend.history == [CounterModel(counter=1)]

    @pytest.mark.asyncio
    async def test_saves_finish_in_publish_order(self):
        backend = FirstSaveSlowBackend(CounterModel())
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)

        store.replace(CounterModel(counter=1))
        store.replace(CounterModel(counter=2))
        assert persister.pending == 2
        await persister.drain()

        assert [m.counter for m in backend.history] == [1, 2]
        assert backend.last_saved == store.current()

    @pytest.mark.asyncio
    async def test_failed_save_does_not_block_later_saves(self, caplog):
        backend = FirstSaveFailingBackend(CounterModel())
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)

        with caplog.at_level(logging.ERROR):
            store.replace(CounterModel(counter=1))
            store.replace(CounterModel(counter=2))
            await persister.drain()

        assert backend.history == [CounterModel(counter=2)]
        assert "save of" in caplog.text

    @pytest.mark.asyncio
    async def test_save_failure_is_logged_not_raised(self, caplog):
        backend = FailingBackend()
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)

        with caplog.at_level(logging.ERROR):
            store.replace(CounterModel(counter=5))
            await persister.drain()

        assert backend.save_attempts == 1
        assert store.current().counter == 5
        assert "save of" in caplog.text

    @pytest.mark.asyncio
    async def test_detach_stops_saving(self):
        backend = MemoryBackend(CounterModel())
        store = ObservableStore(CounterModel())
        persister = ChangePersister(backend)
        persister.attach(store)
        persister.detach()

        store.replace(CounterModel(counter=1))
        await persister.drain()

        assert backend.history == []
        assert not persister.attached
        assert store.subscriber_count == 0

    def test_without_event_loop_save_is_skipped(self, caplog):
        backend = MemoryBackend(CounterModel())
        store = ObservableStore(CounterModel())
        ChangePersister(backend).attach(store)

        with caplog.at_level(logging.WARNING):
            store.replace(CounterModel(counter=1))

        assert store.current().counter == 1
        assert backend.history == []
        assert "No running event loop" in caplog.text
