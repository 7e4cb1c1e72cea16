"""
SQL WHERE expressions that select candidate rows for a phonetic match.

MySQL's SOUNDEX() knows nothing about "&", "'n'" or spelled-out numbers, so
an equality test alone misses labels that `sounds_alike` would accept. The
expression built here widens the net with a LIKE pattern where the
conjunction forms become wildcards. It returns more rows than really match;
run the results through `matchers.filter_candidates` afterwards.

Known gaps:

* numerals are not wildcarded, so "Summer of 69" does not find
  "Summer of Sixty-Nine";
* SOUNDEX and LIKE cannot be combined in one predicate, so "Slo & Lo"
  does not find "Slow and Low";
* wildcards over-select ("Jack and Jill" finds "Jack Killed Jill").
"""
import regex as re

from .errors import InvalidColumn
from .preprocess import WS

WILDCARD = "%"

_SPECIAL = re.compile(
    rf"&+|{WS}+and{WS}+|{WS}+n{WS}+|{WS}+'n'{WS}+|{WS}+'n{WS}+|{WS}+n'{WS}+", re.IGNORECASE
)
_QUOTED_N = re.compile(rf"{WS}+n{WS}+|{WS}+'n'{WS}+|{WS}+'n{WS}+|{WS}+n'{WS}+", re.IGNORECASE)
_OTHER = re.compile(rf"&+|{WS}+and{WS}+", re.IGNORECASE)
_BLANK = re.compile(rf"%|{WS}+")

_PART = r"(?:[A-Za-z_][A-Za-z0-9_$]*|`[^`]+`)"
_COLUMN = re.compile(rf"{_PART}(?:\.{_PART})*")

# same set as mysql_escape_string()
_ESCAPES = str.maketrans(
    {
        "\0": "\\0",
        "\n": "\\n",
        "\r": "\\r",
        "\\": "\\\\",
        "'": "\\'",
        '"': '\\"',
        "\x1a": "\\Z",
    }
)


def escape_string(value: str) -> str:
    return value.translate(_ESCAPES)


def _check_column(column: str) -> str:
    if not isinstance(column, str) or not _COLUMN.fullmatch(column):
        raise InvalidColumn(f"Not a plain SQL column reference: {column!r}")
    return column


def wildcard_pattern(value: str) -> str:
    """Escaped LIKE pattern with every conjunction form replaced by '%'."""
    wild = _QUOTED_N.sub(WILDCARD, value)
    wild = _OTHER.sub(WILDCARD, wild)
    return escape_string(wild)


def build_filter(column: str, value: str) -> str:
    """Parenthesized OR of SOUNDEX equality and, when useful, a LIKE test.

    >>> build_filter("name", "Guns & Roses")
    "(SOUNDEX(name)=SOUNDEX('Guns & Roses') OR name LIKE 'Guns % Roses')"
    """
    column = _check_column(column)
    value = value or ""
    clauses = [f"SOUNDEX({column})=SOUNDEX('{escape_string(value)}')"]

    if _SPECIAL.search(value):
        wild = wildcard_pattern(value)
        # a pattern of only wildcards and spaces would match every row
        if _BLANK.sub("", wild):
            clauses.append(f"{column} LIKE '{wild}'")

    return "(" + " OR ".join(clauses) + ")"


generate_candidate_where_clause = build_filter
