"""Utility modules for feedbackDesk.

Available utility modules (all re-exported here for convenience):

- **errors** -- Domain exception hierarchy rooted at FeedbackDeskError.
- **hashing** -- CredentialHasher, the one-way password digest.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **snapshot_list** -- Copy-on-write list shared by the in-memory stores.
- **validators** -- Input rules of the console (email, ratings, form fields).
"""

# -- Domain exception hierarchy --------------------------------------------
from src.utils.errors import (
    ConfigurationError,
    ExportError,
    FeedbackDeskError,
    ValidationError,
)

# -- Credential digests ----------------------------------------------------
from src.utils.hashing import CredentialHasher

# -- Structured logging setup ----------------------------------------------
from src.utils.logging import configure_logging, get_logger

# -- Copy-on-write storage -------------------------------------------------
from src.utils.snapshot_list import SnapshotList

__all__ = [
    "ConfigurationError",
    "CredentialHasher",
    "ExportError",
    "FeedbackDeskError",
    "SnapshotList",
    "ValidationError",
    "configure_logging",
    "get_logger",
]
