from enum import Enum


class Effect(Enum):
    """Skill effects that may carry a configured odds override.

    The member name is the canonical config key for the effect's odds string,
    e.g. ``POWER_OF_4: "30 60 100 100"``.
    """

    NONE = "None"
    OPPORTUNIST = "Opportunist"
    POWER_OF_4 = "Power of 4"
    POWER_OF_5 = "Power of 5"
    POWER_OF_4_PLUS = "Power of 4+"
    POWER_OF_5_PLUS = "Power of 5+"
    HYPER_PUNCH = "Hyper Punch"
    SUPER_BOOST = "Super Boost"
    STABILIZE = "Stabilize"
    SHOT_OUT = "Shot Out"
    SWAP = "Swap"
    DRAGON_TALON = "Dragon Talon"
    BLOCK_SMASH = "Block Smash"
    BARRIER_BASH = "Barrier Bash"
    BARRIER_BASH_PLUS = "Barrier Bash+"
    ROCK_BREAK = "Rock Break"
    FREEZE = "Freeze"
    SLEEP_CHARM = "Sleep Charm"
    SPOOKIFY = "Spookify"
    STEEL_SHIELD = "Steel Shield"
    MEGA_BOOST = "Mega Boost"
    MEGA_BOOST_PLUS = "Mega Boost+"

    @property
    def key(self) -> str:
        """Config key holding this effect's odds string."""
        return self.name

    @classmethod
    def from_key(cls, key: str) -> "Effect":
        """Look up an effect by config key, case-insensitively.

        Raises:
            KeyError: If no effect has that key
        """
        return cls[key.strip().upper()]
