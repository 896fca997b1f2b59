"""
ColumnFile — reads a delimiter-separated text file with a header row.

The header row names the columns. Each name must be unique and must match
one of the Columns passed in, and every passed-in Column must appear, but
the order in the file is free:

    from kanji.columns import ColumnFile, column

    NAME, STROKES = column("Name"), column("Strokes")

    with ColumnFile("extra.txt", [NAME, STROKES]) as f:
        while f.advance():
            print(f.get(NAME), f.get_uint(STROKES))

Row-level failures (wrong field count, bad values) raise DomainError but
leave the file positioned on the next line, so a caller can keep reading
to report every bad row in one pass.
"""

import logging
import os
import re
from typing import Iterable, Optional

from kanji import config
from kanji.columns import REGISTRY
from kanji.columns.registry import Column, ColumnRegistry
from kanji.errors import DomainError

logger = logging.getLogger(__name__)

_COLUMN_NOT_FOUND = -1
_UNSIGNED_INT = re.compile(r"[0-9]+", re.ASCII)


class ColumnFile:
    """
    Sequential reader over the data rows of one column file.

    *source* is either a path (opened with config.FILE_ENCODING) or an open
    text stream. The reader owns the source and closes it exactly once:
    when advance() reaches the end of the data, when close() is called, or
    when construction fails (a path that was never opened needs no close).
    """

    def __init__(self, source, columns: Iterable[Column],
                 delimiter: Optional[str] = None,
                 registry: Optional[ColumnRegistry] = None):
        self._registry = registry if registry is not None else REGISTRY
        self._delimiter = delimiter if delimiter is not None \
            else config.DEFAULT_DELIMITER
        self._current_row = 0
        self._row_valid = False
        self._closed = False

        is_path = isinstance(source, (str, os.PathLike))
        if is_path:
            self._file_name = os.path.basename(os.fspath(source))
        else:
            self._file_name = os.path.basename(
                str(getattr(source, "name", "<stream>")))
            self._reader = source

        try:
            by_name = self._check_columns(list(columns))
        except ValueError:
            if not is_path:
                self._release()
            raise

        self._row_values: list[str] = [""] * len(by_name)
        self._column_to_position = [_COLUMN_NOT_FOUND] * len(self._registry)

        if is_path:
            try:
                self._reader = open(source, "r", encoding=config.FILE_ENCODING)
            except OSError as e:
                raise DomainError(f"failed to read header row: {e}") from e

        try:
            try:
                header = self._read_row()
            except OSError as e:
                raise DomainError(f"failed to read header row: {e}") from e
            if header is None:
                raise self._error("missing header row")
            self._process_header_row(header, by_name)
        except BaseException:
            self._release()
            raise
        logger.debug("opened '%s' with %d columns", self._file_name,
                     len(by_name))

    # ── Properties ────────────────────────────────────────────────

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def num_columns(self) -> int:
        """Number of columns in this file."""
        return len(self._row_values)

    @property
    def current_row(self) -> int:
        """Current data row number, 0 means no rows have been read yet."""
        return self._current_row

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Rows ──────────────────────────────────────────────────────

    def advance(self) -> bool:
        """Read the next row, must be called before any 'get' methods.

        Returns False (and closes the file) when there is no more data.
        Calling again after that raises DomainError.
        """
        if self._closed:
            raise DomainError(f"file '{self._file_name}' has been closed")
        try:
            row = self._read_row()
        except OSError as e:
            raise self._error(f"failed to read next row: {e}") from e
        if row is None:
            logger.debug("closing '%s' after %d rows", self._file_name,
                         self._current_row)
            self.close()
            return False
        self._current_row += 1
        self._row_valid = False
        fields = row.split(self._delimiter)
        if len(fields) > self.num_columns:
            raise self._error("too many columns")
        if len(fields) < self.num_columns:
            raise self._error("not enough columns")
        self._row_values = fields
        self._row_valid = True
        return True

    def __iter__(self):
        while self.advance():
            yield self

    # ── Values ────────────────────────────────────────────────────

    def get(self, column: Column) -> str:
        """Return the raw string for *column* in the current row."""
        if self._current_row == 0:
            raise self._error("'advance' must be called before calling 'get'")
        if column.number >= len(self._column_to_position):
            raise self._error(f"unrecognized column '{column}'")
        if self._registry.name_of(column.number) != column.name:
            raise self._error(f"unrecognized column '{column}'")
        if not self._row_valid:
            raise self._error("current row is malformed")
        pos = self._column_to_position[column.number]
        if pos == _COLUMN_NOT_FOUND:
            raise self._error(f"invalid column '{column}'")
        return self._row_values[pos]

    def get_uint(self, column: Column, max_value: Optional[int] = None) -> int:
        """Return *column* as a non-negative int.

        If *max_value* is given the value must also be <= max_value.
        """
        if max_value is not None and max_value < 0:
            raise ValueError(f"max_value must be non-negative: {max_value}")
        s = self.get(column)
        if not _UNSIGNED_INT.fullmatch(s):
            raise self._error("convert to unsigned int failed", column, s)
        result = int(s)
        if max_value is not None and result > max_value:
            raise self._error(f"exceeded max value of {max_value}", column, s)
        return result

    def get_optional_uint(self, column: Column,
                          max_value: Optional[int] = None) -> Optional[int]:
        """Like get_uint, but an empty value returns None."""
        if not self.get(column):
            return None
        return self.get_uint(column, max_value)

    def get_bool(self, column: Column) -> bool:
        """Return True for 'Y' or 'T', False for 'N', 'F' or ''."""
        s = self.get(column)
        if s in ("Y", "T"):
            return True
        if s in ("N", "F", ""):
            return False
        raise self._error("convert to boolean failed", column, s)

    # ── Lifecycle ─────────────────────────────────────────────────

    def close(self):
        """Close the underlying source (does nothing if already closed)."""
        if self._closed:
            return
        self._closed = True
        try:
            self._reader.close()
        except OSError as e:
            logger.warning("failed to close '%s': %s", self._file_name, e)
            raise DomainError(f"failed to close reader: {e}") from e

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    # ── Internals ─────────────────────────────────────────────────

    def _read_row(self) -> Optional[str]:
        line = self._reader.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def _release(self):
        # used when construction fails, the original error takes priority
        self._closed = True
        try:
            self._reader.close()
        except OSError as e:
            logger.warning("failed to close '%s': %s", self._file_name, e)

    def _check_columns(self, columns: list) -> dict:
        if not columns:
            raise ValueError("must specify at least one column")
        by_name: dict[str, Column] = {}
        for c in columns:
            if c.name in by_name:
                raise ValueError(f"duplicate column '{c}'")
            if not self._registry.has(c.name) or \
                    self._registry.id_of(c.name) != c.number:
                raise ValueError(f"column '{c}' is not from this registry")
            by_name[c.name] = c
        return by_name

    def _process_header_row(self, row: str, columns: dict):
        remaining = dict(columns)
        found = set()
        for pos, header in enumerate(row.split(self._delimiter)):
            if header in found:
                raise self._error(f"duplicate header '{header}'")
            found.add(header)
            c = remaining.pop(header, None)
            if c is None:
                raise self._error(f"unrecognized header '{header}'")
            self._column_to_position[c.number] = pos
        if len(remaining) == 1:
            raise self._error(f"column '{next(iter(remaining))}' not found")
        if len(remaining) > 1:
            missing = "', '".join(sorted(remaining))
            raise self._error(
                f"{len(remaining)} columns not found: '{missing}'")

    def _error(self, msg: str, column: Optional[Column] = None,
               value: Optional[str] = None) -> DomainError:
        result = f"{msg} - file: {self._file_name}"
        if self._current_row > 0:
            result += f", row: {self._current_row}"
        if column is not None:
            result += f", column: '{column}', value: '{value}'"
        return DomainError(result)
