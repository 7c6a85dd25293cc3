"""Tests for the remote sheet and uploaded workbook loaders."""
from __future__ import annotations

import pytest
import requests

from core.errors import EmptySource, InvalidSourceReference, MalformedDocument, SourceUnavailable
from core.word_sources import build_export_url, extract_sheet_id, load_from_document, load_from_remote


SHEET_URL = "https://docs.google.com/spreadsheets/d/1AbC-d_9/edit#gid=0"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Records GET calls and replays a canned response (or raises)."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


# ---- Sheet id extraction ----

def test_extract_sheet_id():
    assert extract_sheet_id(SHEET_URL) == "1AbC-d_9"


@pytest.mark.parametrize("url", ["", "https://example.com/sheet", "spreadsheets/1AbC"])
def test_extract_sheet_id_rejects_urls_without_id(url):
    with pytest.raises(InvalidSourceReference):
        extract_sheet_id(url)


def test_export_url_targets_csv_endpoint():
    assert build_export_url("abc") == "https://docs.google.com/spreadsheets/d/abc/gviz/tq?tqx=out:csv"


# ---- Remote loading ----

def test_load_from_remote_parses_csv_in_row_order():
    body = (
        '"German","Spanish","Audio","Notes","Failed"\n'
        '"Hallo","Hola","https://a/1.mp3","greeting","2"\n'
        '"","Vacío","","",""\n'
        '"Guten Tag, Herr","Buenos días, señor","https://a/2.mp3","",""\n'
    )
    session = FakeSession(FakeResponse(200, body))

    words = load_from_remote(SHEET_URL, session=session, timeout=5)

    assert [(w.source, w.target) for w in words] == [
        ("Hallo", "Hola"),
        ("Guten Tag, Herr", "Buenos días, señor"),
    ]
    assert words[0].note == "greeting"
    assert words[0].fail_count == 2
    assert words[1].fail_count == 0
    assert session.calls == [(build_export_url("1AbC-d_9"), 5)]


def test_load_from_remote_makes_exactly_one_request_on_error_status():
    session = FakeSession(FakeResponse(404, "not found"))

    with pytest.raises(SourceUnavailable) as excinfo:
        load_from_remote(SHEET_URL, session=session)

    assert excinfo.value.status == 404
    assert "404" in str(excinfo.value)
    assert len(session.calls) == 1


def test_load_from_remote_transport_error_is_source_unavailable():
    session = FakeSession(error=requests.ConnectionError("connection refused"))

    with pytest.raises(SourceUnavailable) as excinfo:
        load_from_remote(SHEET_URL, session=session)

    assert excinfo.value.status is None
    assert len(session.calls) == 1


def test_load_from_remote_invalid_url_never_fetches():
    session = FakeSession(FakeResponse(200, ""))

    with pytest.raises(InvalidSourceReference):
        load_from_remote("https://example.com/not-a-sheet", session=session)

    assert session.calls == []


def test_load_from_remote_empty_body_is_empty_source():
    with pytest.raises(EmptySource):
        load_from_remote(SHEET_URL, session=FakeSession(FakeResponse(200, "")))


def test_load_from_remote_header_only_is_empty_source():
    body = '"German","Spanish","Audio"\n'
    with pytest.raises(EmptySource):
        load_from_remote(SHEET_URL, session=FakeSession(FakeResponse(200, body)))


def test_load_from_remote_custom_export_template():
    body = 'a,b,c\nHallo,Hola,x.mp3\n'
    session = FakeSession(FakeResponse(200, body))

    load_from_remote(SHEET_URL, session=session, export_url_template="http://mirror/{sheet_id}.csv")

    assert session.calls[0][0] == "http://mirror/1AbC-d_9.csv"


# ---- Workbook loading ----

def test_load_from_document_reads_first_sheet(build_workbook):
    data = build_workbook([
        ["Word", "Translation", "Audio", "Notes", "Times Failed"],
        ["Hallo", "Hola", "a.mp3", "hi", 3],
        ["", "Vacío", "", None, None],
        ["Danke", "Gracias", "b.mp3", None, None],
    ])

    words = load_from_document(data)

    assert [(w.source, w.note, w.fail_count) for w in words] == [
        ("Hallo", "hi", 3),
        ("Danke", "", 0),
    ]


def test_load_from_document_three_columns_only(build_workbook):
    data = build_workbook([
        ["Word", "Translation", "Audio"],
        ["Hallo", "Hola", "a.mp3"],
    ])

    words = load_from_document(data)

    assert words[0].note == ""
    assert words[0].fail_count == 0


def test_load_from_document_numeric_cells_become_text(build_workbook):
    data = build_workbook([
        ["Word", "Translation", "Audio", "Notes", "Times Failed"],
        [100, "cien", "c.mp3", 2024, "x"],
    ])

    words = load_from_document(data)

    assert words[0].source == "100"
    assert words[0].note == "2024"
    assert words[0].fail_count == 0


@pytest.mark.parametrize("payload", [b"", b"definitely not a workbook"])
def test_load_from_document_rejects_unreadable_payloads(payload):
    with pytest.raises(MalformedDocument):
        load_from_document(payload)


def test_load_from_document_without_valid_rows(build_workbook):
    data = build_workbook([
        ["Word", "Translation", "Audio"],
        ["only", "two", None],
    ])

    with pytest.raises(EmptySource):
        load_from_document(data)


def test_load_from_document_keeps_literal_na_like_text(build_workbook):
    data = build_workbook([
        ["Word", "Translation", "Audio", "Notes", "Times Failed"],
        ["null", "cero", "n.mp3", None, 1],
        ["Hallo", "Hola", "h.mp3", "NA", None],
        ["None", "ninguno", "x.mp3", "n/a", None],
    ])

    words = load_from_document(data)

    assert [(w.source, w.note, w.fail_count) for w in words] == [
        ("null", "", 1),
        ("Hallo", "NA", 0),
        ("None", "n/a", 0),
    ]


def test_load_from_remote_row_wider_than_header():
    body = (
        'German,Spanish,Audio\n'
        '"Hallo","Hola","a.mp3","note","2"\n'
        '"Danke","Gracias"\n'
    )

    words = load_from_remote(SHEET_URL, session=FakeSession(FakeResponse(200, body)))

    assert [(w.source, w.note, w.fail_count) for w in words] == [("Hallo", "note", 2)]


def test_load_from_remote_keeps_literal_na_like_text():
    body = 'a,b,c,d\nnull,cero,n.mp3,NA\n'

    words = load_from_remote(SHEET_URL, session=FakeSession(FakeResponse(200, body)))

    assert [(w.source, w.note) for w in words] == [("null", "NA")]
