"""YAML-backed key-value configuration store."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Final, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from effectconf.store.errors import ConfigLoadError
from effectconf.utils.env import interpolate_env

logger: Final = logging.getLogger(__name__)

ScalarValue = Union[bool, int, float, str]
StoreListener = Callable[["ConfigStore"], None]

_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")

# A config document is a flat mapping; null values delete the key
_DOCUMENT_ADAPTER: Final = TypeAdapter(dict[str, Optional[ScalarValue]])


class ConfigStore:
    """Flat key-value store loaded from an ordered list of YAML files.

    Later files override keys from earlier ones. Listeners registered with
    :meth:`subscribe` are called after any load, merge or copy that changes a value.

    Examples:
        store = ConfigStore([Path("defaults.yaml"), Path("user.yaml")])
        store.load()
        store.get_string("POWER_OF_4")
    """

    def __init__(self, load_paths: Iterable[Path | str] = ()) -> None:
        self._lock = threading.RLock()
        self._load_paths: list[Path] = [Path(p) for p in load_paths]
        self._values: dict[str, ScalarValue] = {}
        self._listeners: list[StoreListener] = []

    @property
    def load_paths(self) -> list[Path]:
        """Files read by :meth:`load`, in override order."""
        with self._lock:
            return list(self._load_paths)

    # ---- change notification ----
    def subscribe(self, listener: StoreListener) -> None:
        """Register a callback invoked with this store after values change."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        """Remove a previously registered callback; unknown callbacks are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(self)

    # ---- loading ----
    def load(self, paths: Iterable[Path | str] | None = None) -> bool:
        """Reload values from the configured YAML files.

        Args:
            paths: Replacement list of files to load (default: current load paths)

        Returns:
            True if any value was added, removed or changed

        Raises:
            ConfigLoadError: If a file cannot be parsed; the store is left unchanged
        """
        with self._lock:
            if paths is not None:
                self._load_paths = [Path(p) for p in paths]
            merged: dict[str, ScalarValue] = {}
            for path in self._load_paths:
                merged = _apply(merged, self._read_file(path))
            changed = self._replace(merged)

        if changed:
            logger.info("Configuration changed after loading %d file(s)", len(self._load_paths))
            self._notify()
        else:
            logger.debug("Configuration unchanged after reload")
        return changed

    def merge(self, values: Mapping[str, Optional[ScalarValue]]) -> bool:
        """Overlay values on top of the current ones.

        Args:
            values: Keys to set; a ``None`` value removes the key

        Returns:
            True if any value was added, removed or changed
        """
        overlay = _DOCUMENT_ADAPTER.validate_python(dict(values))
        with self._lock:
            changed = self._replace(_apply(self._values, overlay))
        if changed:
            self._notify()
        return changed

    def copy_from(self, other: ConfigStore) -> bool:
        """Take over another store's load paths and values.

        Listeners are notified when the copy changes any value.

        Returns:
            True if any value changed
        """
        if other is self:
            return False
        with other._lock:
            values = dict(other._values)
            load_paths = list(other._load_paths)
        with self._lock:
            self._load_paths = load_paths
            changed = self._replace(values)
        if changed:
            self._notify()
        return changed

    def _replace(self, values: dict[str, ScalarValue]) -> bool:
        # 1, 1.0 and True compare equal but read back differently
        changed = _typed(values) != _typed(self._values)
        self._values = values
        return changed

    @staticmethod
    def _read_file(path: Path) -> dict[str, Optional[ScalarValue]]:
        if not path.exists():
            logger.debug("Skipping missing config file: %s", path)
            return {}
        try:
            data = yaml.safe_load(interpolate_env(path.read_text(encoding="utf-8")))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(path, f"Unable to read config YAML: {exc}", exc) from exc
        if data is None:
            return {}
        try:
            return _DOCUMENT_ADAPTER.validate_python(data)
        except ValidationError as err:
            raise ConfigLoadError(path, f"Invalid configuration:\n{err}", err) from err

    # ---- lookups ----
    def get_string(self, key: str) -> str | None:
        """Return the value for *key* as text, or None if it is not set."""
        with self._lock:
            value = self._values.get(key)
        return _as_text(value)

    def strings(self) -> dict[str, str]:
        """Return every current value as text, taken under a single lock."""
        with self._lock:
            values = dict(self._values)
        return {key: str(value) for key, value in values.items()}

    def get_integer(self, key: str, default: int) -> int:
        """Return the value for *key* as an integer.

        Args:
            key: Config key
            default: Returned when the key is missing or not an integer

        Returns:
            The configured integer or *default*
        """
        with self._lock:
            value = self._values.get(key)
        if value is None:
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
            return int(value.strip())
        logger.warning("Config value for %s is not an integer: %r", key, value)
        return default

    def keys(self) -> list[str]:
        """Return the currently set keys."""
        with self._lock:
            return list(self._values)

    def as_dict(self) -> dict[str, ScalarValue]:
        """Return a copy of all current values."""
        with self._lock:
            return dict(self._values)


def _apply(
    base: Mapping[str, ScalarValue], overlay: Mapping[str, Optional[ScalarValue]]
) -> dict[str, ScalarValue]:
    result = dict(base)
    for key, value in overlay.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = value
    return result


def _typed(values: Mapping[str, ScalarValue]) -> dict[str, tuple[type, ScalarValue]]:
    return {key: (type(value), value) for key, value in values.items()}


def _as_text(value: Optional[ScalarValue]) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
