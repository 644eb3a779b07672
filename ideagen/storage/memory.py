"""
In-memory idea store.

Ideas live in a dict keyed by id and are lost when the process ends.
"""

import copy
import logging
import threading
from typing import Dict, List, Optional

from ideagen.models.idea import Idea, IdeaDraft
from ideagen.storage.base import IdeaStore

logger = logging.getLogger(__name__)


class MemoryIdeaStore(IdeaStore):
    """
    In-memory store for development and tests.

    Dict insertion order gives get_all() its ascending-id order; an update
    replaces the value in place so the idea keeps its position.
    """

    def __init__(self):
        self._ideas: Dict[int, Idea] = {}
        self._next_id = 1
        # Flask's dev server is threaded
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "memory"

    def save(self, draft: IdeaDraft) -> Idea:
        with self._lock:
            idea_id = self._next_id
            self._next_id += 1
            idea = Idea.from_draft(idea_id, draft)
            self._ideas[idea_id] = idea
            logger.debug("Saved idea %d (%s)", idea_id, idea.name)
            return copy.deepcopy(idea)

    def get_all(self) -> List[Idea]:
        with self._lock:
            return [copy.deepcopy(idea) for idea in self._ideas.values()]

    def get_by_id(self, idea_id: int) -> Optional[Idea]:
        with self._lock:
            idea = self._ideas.get(idea_id)
            return copy.deepcopy(idea) if idea else None

    def update(self, idea_id: int, draft: IdeaDraft) -> Optional[Idea]:
        with self._lock:
            existing = self._ideas.get(idea_id)
            if existing is None:
                return None

            idea = Idea.from_draft(idea_id, draft, created_at=existing.created_at)
            self._ideas[idea_id] = idea
            logger.debug("Updated idea %d", idea_id)
            return copy.deepcopy(idea)

    def delete(self, idea_id: int) -> bool:
        with self._lock:
            removed = self._ideas.pop(idea_id, None) is not None
            if removed:
                logger.debug("Deleted idea %d", idea_id)
            return removed

    def count(self) -> int:
        with self._lock:
            return len(self._ideas)
