"""
Uploaded word source: an .xlsx workbook.

Only the first sheet is read. Row 0 is the header. Cell text is taken
literally: "NA", "null" or "None" are words, not missing values.
"""

from __future__ import annotations

import io
import logging
import zipfile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from core.errors import MalformedDocument
from core.schemas import Word
from core.word_sources.rows import words_from_rows


logger = logging.getLogger(__name__)


def read_first_sheet(data: bytes) -> list[list[object]]:
    """
    Read the raw rows of the first sheet (header row included).

    Raises:
        MalformedDocument: empty payload or not a readable workbook
    """
    if not data:
        raise MalformedDocument("No file provided.")
    try:
        df = pd.read_excel(
            io.BytesIO(data),
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
            engine="openpyxl",
        )
    except (ValueError, KeyError, IndexError, OSError, zipfile.BadZipFile, InvalidFileException) as exc:
        raise MalformedDocument() from exc
    return df.values.tolist()


def load_from_document(data: bytes) -> list[Word]:
    """
    Load words from the bytes of an uploaded workbook.

    Returns:
        Words in sheet row order (header excluded)
    """
    words = words_from_rows(read_first_sheet(data))
    logger.info("Loaded %d words from workbook (%d bytes)", len(words), len(data))
    return words
