"""
Row-to-Word mapping shared by every word source.

Both the remote CSV export and uploaded workbooks end up as a list of rows;
this module turns those rows into validated Word records.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional, Sequence

from core.constants import MIN_ROW_FIELDS
from core.errors import EmptySource
from core.schemas import Word


logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """
    Render a raw cell as trimmed text.

    Missing cells (None / NaN) become "", and integral floats produced by
    spreadsheet readers drop their trailing ".0".
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def parse_fail_count(value: Any) -> int:
    """
    Parse the fail-count column.

    Absent, non-integer or negative values all fall back to 0.
    """
    text = cell_text(value)
    if not text:
        return 0
    try:
        count = int(text)
    except ValueError:
        try:
            as_float = float(text)
        except ValueError:
            return 0
        if not as_float.is_integer():
            return 0
        count = int(as_float)
    return count if count >= 0 else 0


def word_from_row(cells: Sequence[Any]) -> Optional[Word]:
    """
    Map one data row to a Word, or None when the row is unusable.

    Columns: source, target, audio_ref, note (optional), fail_count (optional).
    """
    if len(cells) < MIN_ROW_FIELDS:
        return None

    source, target, audio_ref = (cell_text(c) for c in cells[:MIN_ROW_FIELDS])
    if not (source and target and audio_ref):
        return None

    note = cell_text(cells[3]) if len(cells) > 3 else ""
    fail_count = parse_fail_count(cells[4]) if len(cells) > 4 else 0

    return Word(
        source=source,
        target=target,
        audio_ref=audio_ref,
        note=note,
        fail_count=fail_count,
    )


def words_from_rows(rows: Iterable[Sequence[Any]]) -> list[Word]:
    """
    Convert a table (header row first) into words, preserving row order.

    Raises:
        EmptySource: no data row produced a valid word
    """
    data_rows = list(rows)[1:]

    words: list[Word] = []
    for row in data_rows:
        word = word_from_row(row)
        if word is not None:
            words.append(word)

    dropped = len(data_rows) - len(words)
    if dropped:
        logger.debug("Dropped %d of %d rows without source/target/audio", dropped, len(data_rows))

    if not words:
        raise EmptySource()
    return words
