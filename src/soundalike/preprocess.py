from typing import Optional

import regex as re
from loguru import logger

from .numbers import LEGACY, NumberNamer

# ASCII whitespace only; NBSP and other Unicode spaces do not separate tokens
WS = r"[ \t\r\n\f\v]"

_CONJUNCTIONS = (
    (re.compile(r"&+"), "AND"),
    (re.compile(r"\++"), "AND"),
    (re.compile(rf"{WS}+N{WS}+"), " AND "),
    (re.compile(rf"{WS}+'N'{WS}+"), " AND "),
    (re.compile(rf"{WS}+'N{WS}+"), " AND "),
    (re.compile(rf"{WS}+N'{WS}+"), " AND "),
)
_NUMERAL = re.compile(r"[0-9]+")
_NON_LETTER = re.compile(r"[^A-Z]+")


def expand_conjunctions(s: str) -> str:
    # expects upper-cased text; order matters ("'N'" must not be eaten by " N ")
    for pat, repl in _CONJUNCTIONS:
        s = pat.sub(repl, s)
    return s


def spell_numerals(s: str, namer: NumberNamer = LEGACY) -> str:
    # each run replaces every occurrence of its digits, in order of appearance
    for num in _NUMERAL.findall(s):
        s = s.replace(num, namer.name(num))
    return s


def letters_only(s: str) -> str:
    return _NON_LETTER.sub("", s)


def normalize(raw: str, namer: Optional[NumberNamer] = None) -> str:
    """Reduce free text to the uppercase letters the encoder works on."""
    s = (raw or "").upper()
    s = expand_conjunctions(s)
    s = spell_numerals(s, namer or LEGACY)
    out = letters_only(s)
    logger.debug("normalized {!r} -> {!r}", raw, out)
    return out
