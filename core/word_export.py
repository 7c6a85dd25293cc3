"""
Export the master word list as a single-sheet .xlsx workbook.

Column order is fixed: source, target, audio_ref, note, fail_count. The
header labels are cosmetic and can be replaced by the caller.
"""

from __future__ import annotations

import io
import logging
from typing import Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from core.constants import COLUMN_PADDING, DEFAULT_EXPORT_HEADER, DEFAULT_SHEET_NAME
from core.schemas import Word


logger = logging.getLogger(__name__)


def words_to_rows(words: Sequence[Word]) -> list[list[object]]:
    return [
        [word.source, word.target, word.audio_ref, word.note, word.fail_count]
        for word in words
    ]


def column_widths(header: Sequence[str], rows: Sequence[Sequence[object]], padding: int = COLUMN_PADDING) -> list[int]:
    """
    Width per column: longest rendered cell (header included) plus padding.
    """
    table = [list(header), *rows]
    return [
        max(len(str(row[i])) if i < len(row) and row[i] is not None else 0 for row in table) + padding
        for i in range(len(header))
    ]


def export_words(
    words: Sequence[Word],
    header: Sequence[str] = DEFAULT_EXPORT_HEADER,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> bytes:
    """
    Build the workbook bytes for a word list.

    Args:
        words: Words in master-list order
        header: Five column titles
        sheet_name: Name of the only sheet

    Returns:
        Raw .xlsx bytes, ready for download
    """
    if len(header) != 5:
        raise ValueError(f"Export header needs 5 labels, got {len(header)}")

    rows = words_to_rows(words)
    df = pd.DataFrame(rows, columns=list(header))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        worksheet = writer.sheets[sheet_name]
        for index, width in enumerate(column_widths(header, rows), start=1):
            worksheet.column_dimensions[get_column_letter(index)].width = width

    logger.info("Exported %d words to workbook", len(words))
    return output.getvalue()
