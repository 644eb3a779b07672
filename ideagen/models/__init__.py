"""
Data models module.

Defines the saved and unsaved startup idea records.
"""

from ideagen.models.idea import Idea, IdeaDraft

__all__ = [
    "Idea",
    "IdeaDraft",
]
