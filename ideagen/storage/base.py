"""
Base storage abstraction for saved startup ideas.

Defines the abstract interface that all idea stores must implement.
This allows swapping the in-memory store for a database-backed one.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ideagen.models.idea import Idea, IdeaDraft


class IdeaStore(ABC):
    """
    Abstract base class for idea stores.

    Implementations must:
    - Assign ids sequentially starting at 1, never reusing one
    - Own their Idea instances and hand out copies only
    - Report "not found" with None / False rather than raising
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this storage backend.

        Used for logging and debugging.
        """
        pass

    @abstractmethod
    def save(self, draft: IdeaDraft) -> Idea:
        """
        Store a new idea.

        Features are stored as given; the store does not pad or trim them.

        Args:
            draft: The idea to save.

        Returns:
            The saved Idea with its newly assigned id.
        """
        pass

    @abstractmethod
    def get_all(self) -> List[Idea]:
        """
        Retrieve every saved idea.

        Returns:
            List of Idea instances in insertion order (ascending id).
        """
        pass

    @abstractmethod
    def get_by_id(self, idea_id: int) -> Optional[Idea]:
        """
        Retrieve a single idea.

        Returns:
            Idea if found, None otherwise.
        """
        pass

    @abstractmethod
    def update(self, idea_id: int, draft: IdeaDraft) -> Optional[Idea]:
        """
        Replace every field of an idea except its id and creation time.

        Returns:
            The updated Idea, or None if the id does not exist.
        """
        pass

    @abstractmethod
    def delete(self, idea_id: int) -> bool:
        """
        Remove an idea.

        Returns:
            True if an idea was removed, False if the id did not exist.
        """
        pass

    def count(self) -> int:
        """Return number of stored ideas."""
        return len(self.get_all())

    def __str__(self) -> str:
        return f"IdeaStore({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
