"""Tests for the .xlsx export of the master list."""
from __future__ import annotations

import io

import pytest
from openpyxl import load_workbook

from core.constants import COLUMN_PADDING, DEFAULT_EXPORT_HEADER, DEFAULT_SHEET_NAME
from core.word_export import column_widths, export_words
from core.word_sources import load_from_document


def _sheet(data: bytes):
    workbook = load_workbook(io.BytesIO(data))
    assert len(workbook.sheetnames) == 1
    return workbook[workbook.sheetnames[0]]


def test_export_layout(words):
    sheet = _sheet(export_words(words))

    rows = list(sheet.iter_rows(values_only=True))
    assert sheet.title == DEFAULT_SHEET_NAME
    assert rows[0] == DEFAULT_EXPORT_HEADER
    assert rows[1][:3] == ("Hallo", "Hola", "https://audio.example/hallo.mp3")
    assert rows[3][4] == 2
    assert len(rows) == len(words) + 1


def test_export_custom_header_and_sheet(words):
    header = ("Alemán", "Español", "URL de Audio", "Notas", "Veces Fallado")

    sheet = _sheet(export_words(words, header=header, sheet_name="Vocabulario Actualizado"))

    assert sheet.title == "Vocabulario Actualizado"
    assert next(sheet.iter_rows(values_only=True)) == header


def test_export_rejects_wrong_header_size(words):
    with pytest.raises(ValueError):
        export_words(words, header=("a", "b"))


def test_column_widths_fit_longest_cell_plus_padding(word_factory):
    words = [word_factory("Hallo", "Hola", "https://audio.example/a-very-long-file-name.mp3")]

    sheet = _sheet(export_words(words))

    assert sheet.column_dimensions["A"].width == len("Hallo") + COLUMN_PADDING
    assert sheet.column_dimensions["C"].width == len("https://audio.example/a-very-long-file-name.mp3") + COLUMN_PADDING
    assert sheet.column_dimensions["E"].width == len("Times Failed") + COLUMN_PADDING


def test_column_widths_helper():
    widths = column_widths(("ab", "c"), [["abcd", None], ["x", "yyy"]], padding=1)

    assert widths == [5, 4]


def test_round_trip_preserves_words_and_order(words, word_factory):
    words = words + [word_factory("Zahl", "número", note="f. (el)", fail_count=11)]

    reloaded = load_from_document(export_words(words))

    assert [(w.source, w.target, w.audio_ref, w.note, w.fail_count) for w in reloaded] == [
        (w.source, w.target, w.audio_ref, w.note, w.fail_count) for w in words
    ]


def test_export_empty_list_has_header_only():
    sheet = _sheet(export_words([]))

    assert list(sheet.iter_rows(values_only=True)) == [DEFAULT_EXPORT_HEADER]


def test_round_trip_keeps_na_like_words(word_factory):
    words = [
        word_factory("null", "cero"),
        word_factory("Hallo", "Hola", note="NA"),
        word_factory("None", "ninguno", note="null"),
    ]

    reloaded = load_from_document(export_words(words))

    assert [(w.source, w.target, w.note) for w in reloaded] == [
        ("null", "cero", ""),
        ("Hallo", "Hola", "NA"),
        ("None", "ninguno", "null"),
    ]
