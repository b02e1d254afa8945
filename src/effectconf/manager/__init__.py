"""Derived settings built on top of the configuration store.

This package provides:
- EffectManager: cached effect odds and per-mega settings lookups
- parse_odds / odds_index: odds string parsing and combo size mapping
- mega_speedup_key / mega_threshold_key: per-mega config key derivation
"""

from effectconf.manager.effects import EffectManager
from effectconf.manager.keys import mega_speedup_key, mega_threshold_key
from effectconf.manager.odds import Odds, odds_index, parse_odds

__all__ = [
    "EffectManager",
    "Odds",
    "mega_speedup_key",
    "mega_threshold_key",
    "odds_index",
    "parse_odds",
]
