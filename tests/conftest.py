"""Shared fixtures for the quiz trainer tests."""
from __future__ import annotations

import io
import random

import pandas as pd
import pytest

from core.schemas import Word


def make_word(source: str, target: str, audio_ref: str | None = None, note: str = "", fail_count: int = 0) -> Word:
    return Word(
        source=source,
        target=target,
        audio_ref=audio_ref or f"https://audio.example/{source.lower()}.mp3",
        note=note,
        fail_count=fail_count,
    )


def workbook_bytes(rows: list[list[object]], sheet_name: str = "Sheet1") -> bytes:
    """Build an .xlsx in memory; the first row is written as the header."""
    output = io.BytesIO()
    header, *data = rows
    df = pd.DataFrame(data, columns=header)
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
    return output.getvalue()


@pytest.fixture
def words() -> list[Word]:
    return [
        make_word("Hallo", "Hola"),
        make_word("Tschüss", "Adiós", note="informal"),
        make_word("Danke", "Gracias", fail_count=2),
        make_word("Bitte", "Por favor"),
    ]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def word_factory():
    return make_word


@pytest.fixture
def build_workbook():
    return workbook_bytes
