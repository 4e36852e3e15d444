"""Public interface definitions for the feedbackDesk stores.

The data service talks to storage exclusively through the abstract base
classes defined in this package.  Concrete stores implement them and are
wired together in ``DataService.create``.

CONCRETE STORE MAP:
    Interface          →  Concrete implementations
    ──────────────────────────────────────────────────────
    IUserStore         →  MemoryUserStore
    IFormStore         →  MemoryFormStore
    IFeedbackStore     →  MemoryFeedbackStore
"""

from src.interfaces.feedback_store import IFeedbackStore
from src.interfaces.form_store import IFormStore
from src.interfaces.user_store import IUserStore

__all__ = ["IFeedbackStore", "IFormStore", "IUserStore"]
