"""Typed effect odds and mega settings over a YAML configuration store."""

from effectconf.common.enums import Effect
from effectconf.manager import EffectManager
from effectconf.models import Species
from effectconf.store import ConfigStore

__all__ = ["ConfigStore", "Effect", "EffectManager", "Species"]
