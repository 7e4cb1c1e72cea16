from typing import Callable, Iterable, List, Optional, TypeVar

from loguru import logger

from .errors import OutOfRange
from .numbers import NumberNamer
from .phonetic import encode

T = TypeVar("T")


def _safe_encode(word: str, namer: Optional[NumberNamer]) -> Optional[str]:
    try:
        return encode(word, namer)
    except OutOfRange as e:
        logger.warning("cannot encode {!r}: {}", word, e)
        return None


def sounds_alike(a: str, b: str, namer: Optional[NumberNamer] = None) -> bool:
    """True when both labels are non-empty and share a phonetic code.

    Emptiness is checked on the raw input, so two symbol-only labels
    (both encoding to "") still compare equal.
    """
    if not a or not b:
        return False
    ca = _safe_encode(a, namer)
    if ca is None:
        return False
    cb = _safe_encode(b, namer)
    if cb is None:
        return False
    return ca == cb


compare = sounds_alike


def filter_candidates(
    value: str,
    candidates: Iterable[T],
    key: Optional[Callable[[T], str]] = None,
    namer: Optional[NumberNamer] = None,
) -> List[T]:
    """Keep the candidates that sound like `value`, preserving order.

    Meant for the rows returned by the SQL candidate filter, which is
    deliberately wider than an exact phonetic match.
    """
    if not value:
        return []
    target = _safe_encode(value, namer)
    if target is None:
        return []

    hits = []
    for cand in candidates:
        label = key(cand) if key is not None else cand
        if not label:
            continue
        if _safe_encode(label, namer) == target:
            hits.append(cand)
    logger.debug("{} candidate(s) sound like {!r}", len(hits), value)
    return hits
