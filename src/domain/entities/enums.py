"""
Multi-site Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Optional


class PageStatus(str, Enum):
    """Publishing status of a page"""

    draft = "draft"
    reviewed = "reviewed"
    published = "published"
    hidden = "hidden"

    @classmethod
    def lookup(cls, name: Optional[str]) -> Optional["PageStatus"]:
        """Case-insensitive lookup by name, None when unknown"""
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None
