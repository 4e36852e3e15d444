"""In-memory store providers.

Each store keeps its records in a copy-on-write
:class:`~src.utils.snapshot_list.SnapshotList`: reads never block and always
see a complete version; writes are serialized per store.  Nothing is
persisted -- all data is lost when the process exits.
"""

from src.providers.memory.feedback_store import MemoryFeedbackStore
from src.providers.memory.form_store import MemoryFormStore
from src.providers.memory.user_store import MemoryUserStore

__all__ = ["MemoryFeedbackStore", "MemoryFormStore", "MemoryUserStore"]
