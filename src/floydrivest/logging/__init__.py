"""Diagnostic logging subsystem for floydrivest.

Provides immutable per-call selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from floydrivest.logging.logger import SelectionLogger
from floydrivest.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
