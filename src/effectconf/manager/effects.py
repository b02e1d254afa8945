"""Typed access to effect odds and per-mega settings."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from effectconf.common.enums import Effect
from effectconf.constants import DEFAULT_MEGA_SPEEDUP_CAP, DEFAULT_ODDS, MAX_THRESHOLD
from effectconf.manager.keys import mega_speedup_key, mega_threshold_key
from effectconf.manager.odds import Odds, odds_index, parse_odds
from effectconf.models.species import Species
from effectconf.store.config_store import ConfigStore
from effectconf.store.errors import OddsParseError

logger: Final = logging.getLogger(__name__)


class EffectManager:
    """Derived settings cache over a :class:`ConfigStore`.

    Odds strings are parsed once per store change into a table keyed by
    :class:`Effect`. Mega speedup caps and thresholds are read straight from
    the store on every call.

    The odds table is replaced as a whole on every rebuild, so readers see
    either the previous table or the new one, never a mix of both. Rebuilds
    and single-effect refreshes are serialized on an instance lock.

    Examples:
        manager = EffectManager.from_paths([Path("effects.yaml")])
        manager.get_odds(Effect.POWER_OF_4, 5)
        manager.get_mega_threshold(Species("Gengar", mega_name="Mega Gengar"))
    """

    def __init__(self, store: ConfigStore) -> None:
        """Wrap *store* and build the odds table from its current values.

        Args:
            store: Backing key-value store
        """
        self._lock = threading.RLock()
        self._odds: dict[Effect, Odds] = {}
        self._generation = 0
        self._store = store
        self._store.subscribe(self._on_store_changed)
        self._following = True
        self._rebuild()

    @classmethod
    def from_paths(cls, load_paths: Iterable[Path | str]) -> EffectManager:
        """Create a manager over a new store loaded from *load_paths*.

        Raises:
            ConfigLoadError: If one of the files cannot be parsed
        """
        store = ConfigStore(load_paths)
        store.load()
        return cls(store)

    @property
    def store(self) -> ConfigStore:
        """The backing key-value store."""
        return self._store

    @property
    def generation(self) -> int:
        """Number of full odds table rebuilds performed so far."""
        return self._generation

    def close(self) -> None:
        """Stop following changes in the backing store."""
        self._store.unsubscribe(self._on_store_changed)
        self._following = False

    # ---- reload contract ----
    def reload(self, paths: Iterable[Path | str] | None = None) -> bool:
        """Reload the backing store, rebuilding odds only if something changed.

        Args:
            paths: Replacement list of files for the store to load

        Returns:
            True if the store reported a change
        """
        return self._store.load(paths)

    def copy_from(self, other: EffectManager) -> None:
        """Take over another manager's configuration and rebuild the odds table.

        The other manager's odds table is never copied; the table is always
        derived again from the copied values. Other managers sharing this
        manager's store rebuild as well when the copy changes its values.
        """
        changed = self._store.copy_from(other.store)
        # a change already rebuilt this manager through the store notification
        if not changed or not self._following:
            self._rebuild()

    def _on_store_changed(self, store: ConfigStore) -> None:
        self._rebuild()

    def _rebuild(self) -> None:
        with self._lock:
            # one consistent view of the store for every effect
            values = self._store.strings()
            odds: dict[Effect, Odds] = {}
            for effect in Effect:
                entry = self._derive_odds(effect, values.get(effect.key))
                if entry is not None:
                    odds[effect] = entry
            self._odds = odds
            self._generation += 1
            logger.debug(
                "Rebuilt odds table (generation %d, %d override(s))",
                self._generation,
                len(odds),
            )

    # ---- odds ----
    def refresh_effect(self, effect: Effect) -> None:
        """Re-derive the odds entry for *effect* from its current raw value."""
        with self._lock:
            entry = self._derive_odds(effect, self._store.get_string(effect.key))
            odds = dict(self._odds)
            if entry is None:
                odds.pop(effect, None)
            else:
                odds[effect] = entry
            self._odds = odds

    @staticmethod
    def _derive_odds(effect: Effect, raw: str | None) -> Odds | None:
        if not raw:
            return None
        try:
            return parse_odds(raw)
        except OddsParseError as err:
            logger.warning("Bad odds for %s, using %s: %s", effect.key, err.partial, err)
            return (err.partial[0], err.partial[1], err.partial[2], err.partial[3])

    def get_odds(self, effect: Effect, num: int) -> float:
        """Return the odds of *effect* activating for a combo of *num* blocks.

        Combo sizes of 3 or less use the first value and sizes of 6 or more
        use the last one. Effects without an override always return 1.0.
        """
        index = odds_index(num)
        entry = self._odds.get(effect)
        if entry is None:
            return DEFAULT_ODDS[index]
        return entry[index]

    def odds_snapshot(self) -> dict[Effect, Odds]:
        """Return a copy of the current odds overrides."""
        return dict(self._odds)

    # ---- mega settings ----
    def get_mega_speedup_key(self, species: Species) -> str | None:
        """Config key for the mega speedup cap of *species*, if it can mega."""
        return mega_speedup_key(species)

    def get_mega_threshold_key(self, species: Species) -> str | None:
        """Config key for the mega threshold of *species*, if it can mega."""
        return mega_threshold_key(species)

    def get_mega_speedup_cap(self, species: Species) -> int:
        """Return the configured mega speedup cap, or 0 if unset."""
        key = mega_speedup_key(species)
        if key is None:
            return DEFAULT_MEGA_SPEEDUP_CAP
        return self._store.get_integer(key, DEFAULT_MEGA_SPEEDUP_CAP)

    def get_mega_threshold(self, species: Species) -> int:
        """Return the configured mega threshold, or MAX_THRESHOLD if unset."""
        key = mega_threshold_key(species)
        if key is None:
            return MAX_THRESHOLD
        return self._store.get_integer(key, MAX_THRESHOLD)
