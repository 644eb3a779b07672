"""
Storage module.

Handles persistence and retrieval of saved ideas.
"""

from ideagen.storage.base import IdeaStore
from ideagen.storage.memory import MemoryIdeaStore

__all__ = [
    "IdeaStore",
    "MemoryIdeaStore",
]
