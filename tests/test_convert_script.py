"""Tests for the word list conversion script."""
from __future__ import annotations

from scripts.data import convert_word_list
from core.word_sources import load_from_document


def test_convert_file_drops_unusable_rows(tmp_path, build_workbook):
    source = tmp_path / "words.xlsx"
    source.write_bytes(build_workbook([
        ["Word", "Translation", "Audio", "Notes", "Times Failed"],
        ["Hallo", "Hola", "a.mp3", None, "-3"],
        ["kaputt", None, None, None, None],
        ["Danke", "Gracias", "b.mp3", "polite", 2],
    ]))
    out = tmp_path / "out" / "clean.xlsx"

    exit_code = convert_word_list.main(["--file", str(source), "--out", str(out)])

    assert exit_code == 0
    words = load_from_document(out.read_bytes())
    assert [(w.source, w.note, w.fail_count) for w in words] == [
        ("Hallo", "", 0),
        ("Danke", "polite", 2),
    ]


def test_convert_missing_file(tmp_path, capsys):
    exit_code = convert_word_list.main(["--file", str(tmp_path / "missing.xlsx")])

    assert exit_code == 1
    assert "File not found" in capsys.readouterr().err


def test_convert_reports_source_errors(tmp_path, capsys):
    exit_code = convert_word_list.main(["--url", "https://example.com/nope", "--out", str(tmp_path / "x.xlsx")])

    assert exit_code == 1
    assert "Invalid Google Sheet URL" in capsys.readouterr().err
    assert not (tmp_path / "x.xlsx").exists()
