"""
Use Cases

Organized into domain folders:
- sites/: Site resolution and site management
- content/: Site-scoped layouts and snippets

Import from subdirectories for better organization.
"""

from .content import (
    ContentStatsUseCase,
    CreateLayoutUseCase,
    CreateSnippetUseCase,
    ListLayoutsUseCase,
    ListSnippetsUseCase,
)
from .sites import (
    CreateSiteUseCase,
    DeleteSiteUseCase,
    GetCurrentSiteUseCase,
    ListSitesUseCase,
    UpdateSiteUseCase,
)

__all__ = [
    # Sites
    "GetCurrentSiteUseCase",
    "ListSitesUseCase",
    "CreateSiteUseCase",
    "UpdateSiteUseCase",
    "DeleteSiteUseCase",
    # Content
    "ListLayoutsUseCase",
    "CreateLayoutUseCase",
    "ListSnippetsUseCase",
    "CreateSnippetUseCase",
    "ContentStatsUseCase",
]
