"""
Soundex-style phonetic codes.

The first letter is kept, the rest map to digit classes; vowels and H, W, Y
are silent (0) and dropped after adjacent duplicates collapse. Codes are
right padded with "0" to four characters but never truncated.
"""
from itertools import groupby
from typing import Optional

from loguru import logger

from .numbers import NumberNamer
from .preprocess import normalize

CODE_LENGTH = 4

_CLASSES = {
    "AEIOUHWY": "0",
    "BFPV": "1",
    "CGJKQSXZ": "2",
    "DT": "3",
    "L": "4",
    "MN": "5",
    "R": "6",
}
_TABLE = str.maketrans({c: d for letters, d in _CLASSES.items() for c in letters})


def encode_letters(w: str) -> str:
    """Encode text that is already normalized (A-Z only)."""
    if not w:
        return ""
    digits = w.translate(_TABLE)
    mapped = w[0] + digits[1:]
    collapsed = "".join(ch for ch, _ in groupby(mapped))
    code = collapsed.replace("0", "")
    return code.ljust(CODE_LENGTH, "0")


def encode(word: str, namer: Optional[NumberNamer] = None) -> str:
    code = encode_letters(normalize(word, namer))
    logger.debug("encoded {!r} -> {!r}", word, code)
    return code
