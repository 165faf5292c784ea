import pandas as pd
import pytest

from typeahead.rank_cli import load_candidates, load_emojis, main


def test_cli_ranks_name_column(tmp_path, capsys, quiet_logger):
    path = tmp_path / "people.csv"
    path.write_text("Name\nJohn\nJohann\nJoanna\n", encoding="utf-8")

    assert main(["--candidates", str(path), "--query", "joh"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "  1. Johann"
    assert out[1] == "  2. John"
    assert out[-1] == "matches=2 rest=1"


def test_cli_emoji_mode(tmp_path, capsys, quiet_logger):
    path = tmp_path / "emoji.csv"
    path.write_text(
        "emoji_name,emoji_code,reaction_type\n"
        "thumbs_down,1f44e,unicode_emoji\n"
        "thumbs_up,1f44d,unicode_emoji\n"
        "thumbs_realm,,realm_emoji\n",
        encoding="utf-8",
    )

    assert main(["--candidates", str(path), "--query", "thumbs", "--emoji"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "thumbs_up\t1f44d",
        "thumbs_realm\trealm",
        "thumbs_down\t1f44e",
    ]


def test_load_emojis_infers_reaction_type(tmp_path):
    path = tmp_path / "emoji.csv"
    path.write_text("emoji_name,emoji_code\nsmile,1f642\nparrot,\n", encoding="utf-8")
    emojis = load_emojis(path)
    assert [e.is_realm_emoji for e in emojis] == [False, True]


def test_load_candidates_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_candidates(tmp_path / "missing.csv")

    path = tmp_path / "people.csv"
    path.write_text("name\nJohn\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_candidates(path, column="title")


def test_load_candidates_from_xlsx_skips_blank_cells(tmp_path):
    path = tmp_path / "people.xlsx"
    pd.DataFrame({"Name": ["John", None, "Jo"]}).to_excel(path, index=False)
    assert load_candidates(path) == ["John", "Jo"]


def test_non_xlsx_suffix_is_read_as_csv(tmp_path):
    path = tmp_path / "people.xls"
    path.write_text("name\nJohn\n", encoding="utf-8")
    assert load_candidates(path) == ["John"]
