"""
English names for integers, short scale, up to the vigintillion group.

    >>> name_number("169")
    'ONE HUNDRED SIXTY-NINE'
    >>> name_number("2006")
    'TWO THOUSAND SIX'
"""
from __future__ import annotations

from typing import Tuple, Union

import regex as re

from .errors import OutOfRange

ONES: Tuple[str, ...] = (
    "ZERO",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    "ELEVEN",
    "TWELVE",
    "THIRTEEN",
    "FOURTEEN",
    "FIFTEEN",
    "SIXTEEN",
    "SEVENTEEN",
    "EIGHTEEN",
    "NINETEEN",
)

# "legacy" keeps the spellings existing phonetic codes were built from
TENS = {
    "legacy": ("TWENTY", "THIRTY", "FOURTY", "FIFTY", "SIXTY", "SEVENTY", "EIGHTY", "NINTEY"),
    "corrected": ("TWENTY", "THIRTY", "FORTY", "FIFTY", "SIXTY", "SEVENTY", "EIGHTY", "NINETY"),
}

SCALE: Tuple[str, ...] = (
    "",
    "THOUSAND",
    "MILLION",
    "BILLION",
    "TRILLION",
    "QUADRILLION",
    "QUINTILLION",
    "SEXTILLION",
    "SEPTILLION",
    "OCTILLION",
    "NONILLION",
    "DECILLION",
    "UNDECILLION",
    "DUODECILLION",
    "TREDECILLION",
    "QUATTUORDECILLION",
    "SEXDECILLION",
    "SEPTENDECILLION",
    "OCTODECILLION",
    "NOVEMDECILLION",
    "VIGINTILLION",
)

# first value that would need a group beyond VIGINTILLION
LIMIT = 1000 ** len(SCALE)
MAX_DIGITS = len(str(LIMIT)) - 1

SPELLINGS = tuple(TENS)
DEFAULT_SPELLING = "legacy"

_DIGITS = re.compile(r"[0-9]+")


def _as_int(num: Union[str, int]) -> int:
    if isinstance(num, bool):
        raise OutOfRange(num, "not an integer")
    if isinstance(num, int):
        val = num
    else:
        s = str(num).strip()
        if not _DIGITS.fullmatch(s):
            raise OutOfRange(num, "not a run of decimal digits")
        # bound the length before int(), which refuses very long digit strings
        significant = s.lstrip("0") or "0"
        if len(significant) > MAX_DIGITS:
            raise OutOfRange(num)
        val = int(significant)
    if val < 0:
        raise OutOfRange(num, "negative")
    if val >= LIMIT:
        raise OutOfRange(num)
    return val


class NumberNamer:
    """Spell non-negative integers as uppercase English words."""

    def __init__(self, spelling: str = DEFAULT_SPELLING):
        if spelling not in TENS:
            raise ValueError(
                f"Unknown spelling {spelling!r}; expected one of: {', '.join(SPELLINGS)}"
            )
        self.spelling = spelling
        self.tens = TENS[spelling]

    def __repr__(self) -> str:
        return f"NumberNamer(spelling={self.spelling!r})"

    def name(self, num: Union[str, int]) -> str:
        return self._name(_as_int(num))

    def _name(self, val: int) -> str:
        if val < 100:
            return self._tens(val)
        if val < 1000:
            return self._hundreds(val)

        for v in range(2, len(SCALE) + 1):
            if 1000**v > val:
                didx = v - 1
                divisor = 1000**didx
                left, rest = divmod(val, divisor)
                ret = f"{self._hundreds(left)} {SCALE[didx]}"
                if rest > 0:
                    ret = f"{ret} {self._name(rest)}"
                return ret
        # _as_int keeps val below LIMIT
        raise OutOfRange(val)

    def _hundreds(self, val: int) -> str:
        rem, mod = divmod(val, 100)
        words = []
        if rem > 0:
            words.append(f"{ONES[rem]} HUNDRED")
        if mod > 0:
            words.append(self._tens(mod))
        return " ".join(words)

    def _tens(self, val: int) -> str:
        if val < 20:
            return ONES[val]
        tens, ones = divmod(val, 10)
        word = self.tens[tens - 2]
        if ones:
            return f"{word}-{ONES[ones]}"
        return word


LEGACY = NumberNamer("legacy")


def name_number(num: Union[str, int], spelling: str = DEFAULT_SPELLING) -> str:
    namer = LEGACY if spelling == DEFAULT_SPELLING else NumberNamer(spelling)
    return namer.name(num)
