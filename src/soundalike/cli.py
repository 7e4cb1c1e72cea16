import argparse
import sys
from typing import List, Optional

import pandas as pd
from loguru import logger

from .config import load_config
from .errors import SoundalikeError
from .matchers import sounds_alike
from .phonetic import encode
from .pipeline import build_matcher, process_table
from .sql import build_filter


def _detect_sep(path: str) -> str:
    """
    Heuristic: prefer tab if tabs appear in the header; otherwise comma.
    """
    try:
        with open(path, "rb") as fh:
            head = fh.read(2048).decode("utf-8", errors="ignore")
        header = head.splitlines()[0] if head else ""
        return "\t" if "\t" in header else ","
    except OSError:
        # If detection fails, default to comma and let pandas report the error
        return ","


def _read_table(path_in: str, sep_arg: str, text_cols: List[str]) -> pd.DataFrame:
    if sep_arg == "csv":
        sep = ","
    elif sep_arg == "tsv":
        sep = "\t"
    else:  # auto
        sep = _detect_sep(path_in)
    # labels stay text: "007" must not turn into 7
    return pd.read_csv(path_in, sep=sep, dtype={c: str for c in text_cols}, keep_default_na=False)


def run_pairs(path_in: str, cfg_path: Optional[str], out_path: Optional[str] = "-", sep_arg: str = "auto"):
    ctx = build_matcher(cfg_path)
    df = _read_table(path_in, sep_arg, [ctx.columns.left, ctx.columns.right])
    out_df = process_table(df, ctx)

    if out_path in (None, "-"):
        out_df.to_csv(sys.stdout, index=False)
    else:
        out_df.to_csv(out_path, index=False)
        logger.info("wrote {} row(s) to {}", len(out_df), out_path)
    return 0


def run_encode(words: List[str], cfg_path: Optional[str]) -> int:
    namer = load_config(cfg_path).namer()
    for w in words:
        print(f"{w}\t{encode(w, namer)}")
    return 0


def run_compare(a: str, b: str, cfg_path: Optional[str]) -> int:
    namer = load_config(cfg_path).namer()
    same = sounds_alike(a, b, namer)
    print("true" if same else "false")
    return 0 if same else 1


def run_number(num: str, cfg_path: Optional[str]) -> int:
    print(load_config(cfg_path).namer().name(num))
    return 0


def run_filter(column: str, value: str) -> int:
    print(build_filter(column, value))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="soundalike", description="soundalike CLI")
    p.add_argument("--config", default=None, help="YAML config (number spelling, pair columns)")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages on stderr",
    )
    sub = p.add_subparsers(dest="command", required=True)

    pp = sub.add_parser("pairs", help="Compare label pairs from a CSV/TSV table")
    pp.add_argument("--in", dest="path_in", required=True, help="Input CSV/TSV with id/left/right columns")
    pp.add_argument("--out", dest="out_path", default="-", help="Output CSV path (use '-' for stdout)")
    pp.add_argument("--sep", dest="sep", default="auto", choices=["auto", "csv", "tsv"], help="Input delimiter")

    pe = sub.add_parser("encode", help="Print the phonetic code of each word")
    pe.add_argument("words", nargs="+")

    pc = sub.add_parser("compare", help="Exit 0 if the two labels sound alike, 1 otherwise")
    pc.add_argument("a")
    pc.add_argument("b")

    pn = sub.add_parser("number", help="Spell out a number in English")
    pn.add_argument("digits")

    pf = sub.add_parser("filter", help="Print an SQL candidate WHERE expression")
    pf.add_argument("column")
    pf.add_argument("value")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    a = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=a.log_level, format="{level}: {message}", colorize=False)

    try:
        if a.command == "pairs":
            return run_pairs(a.path_in, a.config, a.out_path, a.sep)
        if a.command == "encode":
            return run_encode(a.words, a.config)
        if a.command == "compare":
            return run_compare(a.a, a.b, a.config)
        if a.command == "number":
            return run_number(a.digits, a.config)
        return run_filter(a.column, a.value)
    except (SoundalikeError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
