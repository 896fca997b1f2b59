"""
Error type shared by the column-file reader and the Kanji model.
"""


class DomainError(Exception):
    """Raised when loaded data is malformed or breaks a Kanji invariant."""
