"""
Column definitions and the delimiter-separated column file reader.

Exports REGISTRY, the process-wide ColumnRegistry. Callers that want
isolated ids can build their own ColumnRegistry and pass it to ColumnFile.
"""

from kanji.columns.registry import Column, ColumnRegistry

REGISTRY = ColumnRegistry()


def column(name: str) -> Column:
    """Return the Column for *name* from the shared REGISTRY."""
    return REGISTRY.column(name)


from kanji.columns.column_file import ColumnFile  # noqa: E402

__all__ = ["Column", "ColumnRegistry", "ColumnFile", "REGISTRY", "column"]
