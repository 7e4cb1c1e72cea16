from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .errors import ConfigError
from .numbers import DEFAULT_SPELLING, SPELLINGS, NumberNamer


@dataclass
class Numbers:
    spelling: str = DEFAULT_SPELLING


@dataclass
class Columns:
    # column names of a pairs table
    id: str = "pair_id"
    left: str = "left"
    right: str = "right"


@dataclass
class Config:
    numbers: Numbers = field(default_factory=Numbers)
    columns: Columns = field(default_factory=Columns)

    def namer(self) -> NumberNamer:
        return NumberNamer(self.numbers.spelling)


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = raw.get(name, {}) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"Config error: '{name}' must be a mapping (dict).")
    return sec


def parse_config(raw: Any) -> Config:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config error: top-level YAML must be a mapping (dict).")

    # ---- numbers ----
    numbers_raw = _section(raw, "numbers")
    spelling = str(numbers_raw.get("spelling", DEFAULT_SPELLING)).strip().lower()
    if spelling not in SPELLINGS:
        raise ConfigError(
            f"Config error: 'numbers.spelling' must be one of {', '.join(SPELLINGS)}, "
            f"got {numbers_raw.get('spelling')!r}."
        )
    numbers = Numbers(spelling=spelling)

    # ---- columns ----
    columns_raw = _section(raw, "columns")
    # Only pass known keys to Columns to avoid unexpected-kw errors
    columns_kw: Dict[str, str] = {}
    for key in ("id", "left", "right"):
        if key in columns_raw:
            val = columns_raw[key]
            if val is None or not str(val).strip():
                raise ConfigError(f"Config error: 'columns.{key}' must be a non-empty string.")
            columns_kw[key] = str(val).strip()
    columns = Columns(**columns_kw)
    if len({columns.id, columns.left, columns.right}) != 3:
        raise ConfigError(f"Config error: 'columns' entries must be distinct, got {columns}.")

    return Config(numbers=numbers, columns=columns)


def load_config(path: Optional[str] = None) -> Config:
    if path is None:
        return Config()
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Config error: cannot parse {path}: {e}") from e
    cfg = parse_config(raw)
    logger.debug("loaded config from {}: {}", path, cfg)
    return cfg
