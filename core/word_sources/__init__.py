"""Word source adapters: published Google Sheets and uploaded workbooks."""

from core.word_sources.remote_sheet import (
    build_export_url,
    extract_sheet_id,
    load_from_remote,
)
from core.word_sources.rows import parse_fail_count, word_from_row, words_from_rows
from core.word_sources.spreadsheet import load_from_document

__all__ = [
    "build_export_url",
    "extract_sheet_id",
    "load_from_remote",
    "load_from_document",
    "parse_fail_count",
    "word_from_row",
    "words_from_rows",
]
