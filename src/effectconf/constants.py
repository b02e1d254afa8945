from typing import Final

# Odds used for any effect without a configured override
DEFAULT_ODDS: Final[tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)

# Combo sizes outside this window collapse onto the boundary odds
MIN_ODDS_MAGNITUDE: Final = 3
MAX_ODDS_MAGNITUDE: Final = 6

# Key templates for per-mega settings, formatted with the mega name
FORMAT_MEGA_SPEEDUP_CAP: Final = "MEGA_SPEEDUPS_%s"
FORMAT_MEGA_THRESHOLD: Final = "MEGA_THRESHOLD_%s"

# Speedup cap returned when none is configured
DEFAULT_MEGA_SPEEDUP_CAP: Final = 0

# Threshold returned when none is configured (largest signed 32-bit value)
MAX_THRESHOLD: Final = 2**31 - 1

# Environment variable naming the settings file
CONFIG_ENV_VAR: Final = "EFFECTCONF_CONFIG"
