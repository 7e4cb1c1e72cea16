# src/soundalike/pipeline.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
from loguru import logger

from .config import Columns, Config, load_config
from .errors import OutOfRange
from .numbers import NumberNamer
from .phonetic import encode


class MatchCtx:
    def __init__(self, namer: NumberNamer, columns: Columns):
        self.namer = namer
        self.columns = columns


def build_matcher(cfg_path: Optional[str] = None, cfg: Optional[Config] = None) -> MatchCtx:
    """
    Build the matching context from a YAML path, an already loaded Config,
    or the defaults when neither is given.
    """
    if cfg is None:
        cfg = load_config(cfg_path)
    return MatchCtx(namer=cfg.namer(), columns=cfg.columns)


def process_pair(left: Any, right: Any, ctx: MatchCtx) -> Dict[str, Any]:
    """
    Emits:
      - left_code / right_code: phonetic codes ("" if the label can't be encoded)
      - sounds_alike: 0/1, always 0 when either raw label is empty
      - error: present only when a label holds an out-of-range numeral
    """
    left = "" if _missing(left) else str(left)
    right = "" if _missing(right) else str(right)
    out: Dict[str, Any] = {"left_code": "", "right_code": "", "sounds_alike": 0}

    try:
        out["left_code"] = encode(left, ctx.namer)
        out["right_code"] = encode(right, ctx.namer)
    except OutOfRange as e:
        logger.warning("pair ({!r}, {!r}) not encodable: {}", left, right, e)
        out["error"] = str(e)
        return out

    if left and right and out["left_code"] == out["right_code"]:
        out["sounds_alike"] = 1
    return out


def _missing(v: Any) -> bool:
    return v is None or (isinstance(v, float) and pd.isna(v))


def process_table(df: pd.DataFrame, ctx: MatchCtx) -> pd.DataFrame:
    cols = ctx.columns
    required = (cols.id, cols.left, cols.right)
    for col in required:
        if col not in df.columns:
            raise ValueError(f"Input must contain columns: {', '.join(required)} (missing: {col})")

    rows: List[Dict[str, Any]] = []
    for _, r in df.iterrows():
        res = process_pair(r[cols.left], r[cols.right], ctx)
        rows.append(
            {
                cols.id: r[cols.id],
                cols.left: r[cols.left],
                cols.right: r[cols.right],
                "left_code": res["left_code"],
                "right_code": res["right_code"],
                "sounds_alike": res["sounds_alike"],
                "error": res.get("error", ""),
            }
        )

    out_cols = [cols.id, cols.left, cols.right, "left_code", "right_code", "sounds_alike", "error"]
    out = pd.DataFrame(rows, columns=out_cols)
    if not out.empty:
        out = out.sort_values(cols.id, kind="stable").reset_index(drop=True)
    logger.info("{} of {} pair(s) sound alike", int(out["sounds_alike"].sum()), len(out))
    return out
