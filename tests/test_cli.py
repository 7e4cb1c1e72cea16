import pandas as pd

from soundalike.cli import _detect_sep, main


def test_number(capsys):
    assert main(["number", "169"]) == 0
    assert capsys.readouterr().out.strip() == "ONE HUNDRED SIXTY-NINE"


def test_number_out_of_range(capsys):
    assert main(["number", "1" + "0" * 63]) == 2
    assert "naming scale" in capsys.readouterr().err


def test_encode(capsys):
    assert main(["encode", "Robert", "AC/DC"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Robert\tR163", "AC/DC\tA232"]


def test_compare_exit_codes(capsys):
    assert main(["compare", "Guns 'n' Roses", "Guns and Roses"]) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert main(["compare", "Great", "Bob"]) == 1
    assert capsys.readouterr().out.strip() == "false"


def test_filter(capsys):
    assert main(["filter", "name", "Jack and Jill"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "(SOUNDEX(name)=SOUNDEX('Jack and Jill') OR name LIKE 'Jack%Jill')"
    assert main(["filter", "name;", "x"]) == 2


def test_config_option(tmp_path, capsys):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("numbers:\n  spelling: corrected\n", encoding="utf-8")
    assert main(["--config", str(cfg), "number", "40"]) == 0
    assert capsys.readouterr().out.strip() == "FORTY"


def test_pairs_to_file(tmp_path):
    src = tmp_path / "pairs.csv"
    src.write_text("pair_id,left,right\n1,007,seven\n2,Steel,Bob\n", encoding="utf-8")
    dst = tmp_path / "out.csv"
    assert main(["pairs", "--in", str(src), "--out", str(dst)]) == 0
    out = pd.read_csv(dst, keep_default_na=False)
    assert list(out["sounds_alike"]) == [1, 0]
    assert out.loc[0, "left_code"] == "S150"


def test_pairs_missing_column(tmp_path, capsys):
    src = tmp_path / "pairs.tsv"
    src.write_text("pair_id\tleft\n1\tx\n", encoding="utf-8")
    assert main(["pairs", "--in", str(src)]) == 2
    assert "missing: right" in capsys.readouterr().err


def test_detect_sep(tmp_path):
    tsv = tmp_path / "a.tsv"
    tsv.write_text("a\tb\n1\t2\n", encoding="utf-8")
    assert _detect_sep(str(tsv)) == "\t"
    assert _detect_sep(str(tmp_path / "missing.csv")) == ","
