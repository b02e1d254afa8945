"""Key-value configuration store.

This package provides:
- ConfigStore: YAML-backed key-value store with change notification
- ConfigError and friends: exceptions raised while loading or parsing entries
"""

from effectconf.store.config_store import ConfigStore, StoreListener
from effectconf.store.errors import ConfigError, ConfigLoadError, OddsParseError

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigStore",
    "OddsParseError",
    "StoreListener",
]
