"""
App configuration.

Values come from the environment (a local .env file is loaded first) and fall
back to the defaults below. The core package never reads the environment;
everything here is passed into it explicitly.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from core import constants

# Load environment
load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


# ---- Page ----

APP_TITLE = os.getenv("APP_TITLE", "Vocab Quiz")
PAGE_ICON = "🎧"


# ---- Word Sources ----

SHEET_EXPORT_URL_TEMPLATE = os.getenv("SHEET_EXPORT_URL_TEMPLATE", constants.SHEET_EXPORT_URL_TEMPLATE)
SHEET_FETCH_TIMEOUT = _float_env("SHEET_FETCH_TIMEOUT", 15.0)  # transport timeout, seconds


# ---- Reveal Pause ----

CORRECT_REVEAL_SECONDS = _float_env("CORRECT_REVEAL_SECONDS", constants.CORRECT_REVEAL_SECONDS)
INCORRECT_REVEAL_SECONDS = _float_env("INCORRECT_REVEAL_SECONDS", constants.INCORRECT_REVEAL_SECONDS)


# ---- Export ----

EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", constants.DEFAULT_EXPORT_FILENAME)
EXPORT_HEADER = tuple(
    label.strip()
    for label in os.getenv("EXPORT_HEADER", ",".join(constants.DEFAULT_EXPORT_HEADER)).split(",")
)
EXPORT_SHEET_NAME = os.getenv("EXPORT_SHEET_NAME", constants.DEFAULT_SHEET_NAME)


# ---- Logging ----

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
