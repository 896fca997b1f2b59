"""
Process-wide defaults, read once from the environment at import time.

    KANJI_COLUMN_DELIMITER   field separator for column files (default: tab)
    KANJI_FILE_ENCODING      encoding used when opening a path (default: utf-8)
"""

import os

DEFAULT_DELIMITER = os.environ.get("KANJI_COLUMN_DELIMITER", "\t")

FILE_ENCODING = os.environ.get("KANJI_FILE_ENCODING", "utf-8")
