from pathlib import Path

import pandas as pd
import pytest

from soundalike.pipeline import build_matcher, process_pair, process_table

ROOT = Path(__file__).resolve().parent.parent


def test_example_cfg_and_data():
    ctx = build_matcher(str(ROOT / "configs" / "example.yaml"))
    df = pd.read_csv(
        ROOT / "data" / "examples" / "pairs.tsv",
        sep="\t",
        dtype={"left": str, "right": str},
        keep_default_na=False,
    )
    out = process_table(df, ctx).set_index("pair_id")
    for _, r in df.iterrows():
        assert int(out.loc[r["pair_id"], "sounds_alike"]) == int(r["expected"]), r["pair_id"]


def test_process_pair_codes():
    ctx = build_matcher()
    res = process_pair("Robert", "Rupert", ctx)
    assert res == {"left_code": "R163", "right_code": "R163", "sounds_alike": 1}


def test_process_pair_missing_values():
    ctx = build_matcher()
    assert process_pair(None, "x", ctx)["sounds_alike"] == 0
    assert process_pair(float("nan"), "x", ctx)["left_code"] == ""


def test_process_pair_out_of_range():
    ctx = build_matcher()
    res = process_pair("9" * 70, "nine", ctx)
    assert res["sounds_alike"] == 0
    assert "naming scale" in res["error"]


def test_process_table_sorts_and_validates():
    ctx = build_matcher()
    df = pd.DataFrame({"pair_id": [2, 1], "left": ["Steel", "bob"], "right": ["Steal", "Great"]})
    out = process_table(df, ctx)
    assert list(out["pair_id"]) == [1, 2]
    assert list(out["sounds_alike"]) == [0, 1]
    assert list(out["left_code"]) == ["B100", "S340"]

    with pytest.raises(ValueError, match="missing: right"):
        process_table(df.drop(columns=["right"]), ctx)


def test_process_pair_very_long_numeral():
    res = process_pair("9" * 5000, "x", build_matcher())
    assert res["sounds_alike"] == 0
    assert "naming scale" in res["error"]
