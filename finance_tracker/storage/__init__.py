"""Mini README: Persistence backends for the finance tracker.

Only the flat text format is provided; it keeps the ledger human readable
and compatible with files written by earlier versions of the tracker.
"""

from .flat_file import FlatFileStore

__all__ = ["FlatFileStore"]
