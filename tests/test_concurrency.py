import logging
import threading
import time

import pytest

from effectconf.common.enums import Effect
from effectconf.manager import effects
from effectconf.manager.effects import EffectManager
from effectconf.store.config_store import ConfigStore

ODDS_A = {effect.key: "10 10 10 10" for effect in Effect}
ODDS_B = {effect.key: "90 90 90 90" for effect in Effect}


def _is_uniform(table: dict[Effect, tuple[float, ...]]) -> bool:
    return len(table) == len(Effect) and len(set(table.values())) == 1


class _PublishedTables(logging.Handler):
    """Records the odds table each time a rebuild is logged."""

    def __init__(self, manager: EffectManager) -> None:
        super().__init__(level=logging.DEBUG)
        self.manager = manager
        self.tables: list[dict[Effect, tuple[float, ...]]] = []

    def emit(self, record: logging.LogRecord) -> None:
        if record.getMessage().startswith("Rebuilt odds table"):
            self.tables.append(self.manager.odds_snapshot())


def test_readers_never_see_mixed_tables() -> None:
    store = ConfigStore()
    store.merge(ODDS_A)
    manager = EffectManager(store)
    stop = threading.Event()
    mixed: list[dict[Effect, tuple[float, ...]]] = []

    def reader() -> None:
        while not stop.is_set():
            snapshot = manager.odds_snapshot()
            if not _is_uniform(snapshot):
                mixed.append(snapshot)

    def writer(first: dict[str, str], second: dict[str, str]) -> None:
        for i in range(200):
            store.merge(first if i % 2 == 0 else second)

    readers = [threading.Thread(target=reader) for _ in range(3)]
    writers = [
        threading.Thread(target=writer, args=(ODDS_A, ODDS_B)),
        threading.Thread(target=writer, args=(ODDS_B, ODDS_A)),
    ]
    for thread in readers + writers:
        thread.start()
    for thread in writers:
        thread.join(timeout=30)
    stop.set()
    for thread in readers:
        thread.join(timeout=30)

    assert mixed == []


def test_store_write_during_rebuild_is_not_mixed_in(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    store = ConfigStore()
    store.merge(ODDS_A)
    manager = EffectManager(store)

    paused = threading.Event()
    calls = 0
    real_parse = effects.parse_odds

    def slow_parse(raw: str) -> tuple[float, float, float, float]:
        nonlocal calls
        calls += 1
        if calls == 10:
            # hold the rebuild until the other thread's write has landed
            paused.set()
            deadline = time.monotonic() + 5
            while store.get_string(Effect.SWAP.key) != ODDS_B[Effect.SWAP.key]:
                if time.monotonic() > deadline:
                    break
                time.sleep(0.01)
        return real_parse(raw)

    monkeypatch.setattr(effects, "parse_odds", slow_parse)
    caplog.set_level(logging.DEBUG, logger="effectconf.manager.effects")
    published = _PublishedTables(manager)
    logging.getLogger("effectconf.manager.effects").addHandler(published)

    def writer() -> None:
        paused.wait(timeout=5)
        store.merge(ODDS_B)

    try:
        threads = [
            threading.Thread(target=manager.copy_from, args=(manager,)),
            threading.Thread(target=writer),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)
    finally:
        logging.getLogger("effectconf.manager.effects").removeHandler(published)

    assert paused.is_set()
    assert len(published.tables) == 2
    assert all(_is_uniform(table) for table in published.tables)
    assert manager.odds_snapshot() == {effect: (0.9, 0.9, 0.9, 0.9) for effect in Effect}


def test_concurrent_refresh_and_rebuild() -> None:
    store = ConfigStore()
    store.merge(ODDS_A)
    manager = EffectManager(store)
    manager.close()

    def refresher() -> None:
        for _ in range(100):
            for effect in Effect:
                manager.refresh_effect(effect)

    def copier() -> None:
        for _ in range(50):
            manager.copy_from(manager)

    threads = [threading.Thread(target=refresher), threading.Thread(target=copier)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert manager.odds_snapshot() == {effect: (0.1, 0.1, 0.1, 0.1) for effect in Effect}
    assert manager.generation == 51
