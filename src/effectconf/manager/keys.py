"""Config key derivation for per-mega settings."""

from __future__ import annotations

from effectconf.constants import FORMAT_MEGA_SPEEDUP_CAP, FORMAT_MEGA_THRESHOLD
from effectconf.models.species import Species


def mega_speedup_key(species: Species) -> str | None:
    """Return the mega speedup cap key for *species*, or None if it cannot mega."""
    if not species.can_mega:
        return None
    return FORMAT_MEGA_SPEEDUP_CAP % species.mega_name


def mega_threshold_key(species: Species) -> str | None:
    """Return the mega threshold key for *species*, or None if it cannot mega."""
    if not species.can_mega:
        return None
    return FORMAT_MEGA_THRESHOLD % species.mega_name
