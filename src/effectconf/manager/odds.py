"""Parsing and indexing helpers for effect odds strings.

An odds string holds up to four integer percentages separated by
whitespace, one per combo size from 3 to 6, e.g. ``"30 60 100 100"``.
"""

from __future__ import annotations

import re
from typing import Final

from effectconf.constants import DEFAULT_ODDS, MAX_ODDS_MAGNITUDE, MIN_ODDS_MAGNITUDE
from effectconf.store.errors import OddsParseError

Odds = tuple[float, float, float, float]

_WHITESPACE_RE: Final = re.compile(r"\s+")
_INTEGER_RE: Final = re.compile(r"[+-]?[0-9]+")
_INT32_MIN: Final = -(2**31)
_INT32_MAX: Final = 2**31 - 1


def split_tokens(raw: str) -> list[str]:
    """Split *raw* on runs of whitespace.

    Trailing empty tokens are dropped, but a leading one is kept: an odds
    string that starts with whitespace has an empty (invalid) first token.
    """
    tokens = _WHITESPACE_RE.split(raw)
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def _parse_percentage(token: str) -> int | None:
    if not _INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def parse_odds(raw: str) -> Odds:
    """Parse an odds string into four probabilities.

    Args:
        raw: Whitespace-separated integer percentages

    Returns:
        Four odds, each percentage divided by 100. Missing positions keep
        the default of 1.0 and tokens past the fourth are ignored.

    Raises:
        OddsParseError: On the first token that is not an integer. Its
            ``partial`` attribute holds the odds parsed up to that point.
    """
    result = list(DEFAULT_ODDS)
    for position, token in enumerate(split_tokens(raw)[: len(DEFAULT_ODDS)]):
        trimmed = token.strip()
        value = _parse_percentage(trimmed)
        if value is None:
            raise OddsParseError(raw, trimmed, position, result)
        result[position] = value / 100.0
    return (result[0], result[1], result[2], result[3])


def odds_index(num: int) -> int:
    """Map a combo size onto an odds position in ``0..3``."""
    return max(min(num, MAX_ODDS_MAGNITUDE), MIN_ODDS_MAGNITUDE) - MIN_ODDS_MAGNITUDE
