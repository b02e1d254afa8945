"""Species model used to derive per-mega settings keys."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Species:
    """A species, optionally able to mega evolve.

    Only species with a ``mega_name`` have mega speedup caps and thresholds.
    """

    name: str
    mega_name: str | None = None

    @property
    def can_mega(self) -> bool:
        """Whether this species has a mega form."""
        return self.mega_name is not None
