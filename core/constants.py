"""
Quiz Constants

Fixed parameters shared by the word sources, the session engine and the export.
"""


# ---- Word Sources ----

SHEET_ID_PATTERN = r"/spreadsheets/d/([a-zA-Z0-9-_]+)"
SHEET_EXPORT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv"

MIN_ROW_FIELDS = 3  # source, target, audio_ref


# ---- Reveal Pause ----
# Seconds the evaluated round stays on screen before the next round

CORRECT_REVEAL_SECONDS = 1.0
INCORRECT_REVEAL_SECONDS = 1.5  # longer, so the revealed answer can be read


# ---- Export ----

DEFAULT_EXPORT_HEADER = ("Word", "Translation", "Audio URL", "Notes", "Times Failed")
DEFAULT_SHEET_NAME = "Updated Vocabulary"
DEFAULT_EXPORT_FILENAME = "updated_vocabulary.xlsx"
COLUMN_PADDING = 2
