"""
Convert a word list (published Google Sheet or .xlsx file) into a clean
export workbook.

Rows the quiz cannot use (missing word, translation or audio URL) are dropped,
fail counts are normalized, and the result is written with the standard
column order: word, translation, audio URL, notes, times failed.

Usage:
    python -m scripts.data.convert_word_list --url "https://docs.google.com/spreadsheets/d/<id>/edit"
    python -m scripts.data.convert_word_list --file data/words.xlsx --out data/words_clean.xlsx
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from core.constants import DEFAULT_EXPORT_FILENAME
from core.errors import WordSourceError
from core.word_export import export_words
from core.word_sources import load_from_document, load_from_remote


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a word list into a clean quiz workbook")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Published Google Sheet URL")
    source.add_argument("--file", type=Path, help="Path to an .xlsx workbook")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path(DEFAULT_EXPORT_FILENAME),
        help=f"Output workbook (default: {DEFAULT_EXPORT_FILENAME})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=15.0,
        help="HTTP timeout in seconds for --url (default: 15)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.url:
            words = load_from_remote(args.url, timeout=args.timeout)
        else:
            if not args.file.exists():
                print(f"File not found: {args.file}", file=sys.stderr)
                return 1
            words = load_from_document(args.file.read_bytes())
    except WordSourceError as exc:
        print(f"Could not load words: {exc}", file=sys.stderr)
        return 1

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(export_words(words))

    print(f"✓ Wrote {len(words)} words to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
