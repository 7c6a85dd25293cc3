"""
Remote word source: a Google Sheet published to the web.

The sheet is fetched once as CSV from its export endpoint and parsed with
pandas. There are no retries; the caller decides whether to try again.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from typing import Optional

import pandas as pd
import requests

from core.constants import SHEET_EXPORT_URL_TEMPLATE, SHEET_ID_PATTERN
from core.errors import EmptySource, InvalidSourceReference, MalformedDocument, SourceUnavailable
from core.schemas import Word
from core.word_sources.rows import words_from_rows


logger = logging.getLogger(__name__)

_SHEET_ID_RE = re.compile(SHEET_ID_PATTERN)


def extract_sheet_id(url: str) -> str:
    """
    Extract the document id from a sheet URL.

    Raises:
        InvalidSourceReference: no /spreadsheets/d/<id> segment in the URL
    """
    match = _SHEET_ID_RE.search(url or "")
    if not match:
        raise InvalidSourceReference(url)
    return match.group(1)


def build_export_url(sheet_id: str, template: str = SHEET_EXPORT_URL_TEMPLATE) -> str:
    return template.format(sheet_id=sheet_id)


def _record_width(text: str) -> int:
    return max((len(record) for record in csv.reader(io.StringIO(text))), default=0)


def parse_csv_rows(text: str) -> list[list[str]]:
    """
    Parse CSV text into rows of strings (header row included).

    Rows may be ragged; short rows are padded with missing cells and the row
    rules decide what survives.

    Raises:
        EmptySource: the body has no rows at all
        MalformedDocument: the body is not valid CSV
    """
    if not text.strip():
        raise EmptySource()
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=list(range(_record_width(text))),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise EmptySource() from exc
    except (pd.errors.ParserError, csv.Error, ValueError) as exc:
        raise MalformedDocument("Could not parse the Google Sheet export as CSV.") from exc
    return df.values.tolist()


def load_from_remote(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    export_url_template: str = SHEET_EXPORT_URL_TEMPLATE,
) -> list[Word]:
    """
    Load words from a published Google Sheet.

    Args:
        url: Sheet URL containing /spreadsheets/d/<id>/
        session: Optional requests session (used for the single GET)
        timeout: Transport timeout in seconds, passed straight to requests
        export_url_template: CSV export endpoint with a {sheet_id} placeholder

    Returns:
        Words in sheet row order (header excluded)
    """
    sheet_id = extract_sheet_id(url)
    csv_url = build_export_url(sheet_id, export_url_template)

    http = session or requests
    logger.info("Fetching sheet %s", sheet_id)
    try:
        response = http.get(csv_url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Sheet fetch failed for %s: %s", sheet_id, exc)
        raise SourceUnavailable(reason=str(exc)) from exc

    if not 200 <= response.status_code < 300:
        logger.warning("Sheet %s returned status %s", sheet_id, response.status_code)
        raise SourceUnavailable(response.status_code)

    words = words_from_rows(parse_csv_rows(response.text))
    logger.info("Loaded %d words from sheet %s", len(words), sheet_id)
    return words
