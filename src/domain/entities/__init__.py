"""
Multi-site Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import PageStatus

# Export all entities
from .site import Site
from .page import Page, PagePart
from .layout import Layout
from .snippet import Snippet

__all__ = [
    # Enums
    "PageStatus",
    # Entities
    "Site",
    "Page",
    "PagePart",
    "Layout",
    "Snippet",
]
