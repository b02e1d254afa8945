"""Environment variable helpers."""

from __future__ import annotations

import os
import re
from typing import Final

_ENV_REF_RE: Final = re.compile(r"\$\{(\w+)\}")


def interpolate_env(content: str) -> str:
    """Replace ``${NAME}`` references with environment values (empty if unset)."""
    return _ENV_REF_RE.sub(lambda m: os.getenv(m.group(1), ""), content)
