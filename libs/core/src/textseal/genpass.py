from __future__ import annotations
"""Random password helper, also used to mint symmetric key files.

Character classes leave out glyphs that are easy to confuse (I/O, l/i, 0).
"""

import secrets
from typing import List

UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghjkmnopqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "!@#$%^&*_"

DEFAULT_LENGTH = 16


def _classes(upper: bool, lower: bool, number: bool, symbol: bool) -> List[str]:
    enabled = [
        chars
        for chars, flag in ((UPPER, upper), (LOWER, lower), (NUMBER, number), (SYMBOL, symbol))
        if flag
    ]
    if not enabled:
        raise ValueError("at least one character class must be enabled")
    return enabled


def generate_password(
    length: int = DEFAULT_LENGTH,
    upper: bool = True,
    lower: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    classes = _classes(upper, lower, number, symbol)
    if length < len(classes):
        raise ValueError(f"length {length} cannot hold {len(classes)} required character classes")
    rng = secrets.SystemRandom()
    # one guaranteed pick per class, the rest from the combined pool
    picked = [rng.choice(chars) for chars in classes]
    pool = "".join(classes)
    picked.extend(rng.choice(pool) for _ in range(length - len(picked)))
    rng.shuffle(picked)
    return "".join(picked)
