"""
Site-scoped Content Use Cases

Layouts (owned by one site) and snippets (owned by one site or shared).
"""

from .content_stats_use_case import ContentStatsUseCase
from .create_layout_use_case import CreateLayoutUseCase
from .create_snippet_use_case import CreateSnippetUseCase
from .dtos import (
    ContentStatsResponse,
    CreateLayoutCommand,
    CreateSnippetCommand,
    LayoutListResponse,
    LayoutResponse,
    SnippetListResponse,
    SnippetResponse,
)
from .list_layouts_use_case import ListLayoutsUseCase
from .list_snippets_use_case import ListSnippetsUseCase

__all__ = [
    "ListLayoutsUseCase",
    "CreateLayoutUseCase",
    "ListSnippetsUseCase",
    "CreateSnippetUseCase",
    "ContentStatsUseCase",
    "CreateLayoutCommand",
    "CreateSnippetCommand",
    "LayoutResponse",
    "LayoutListResponse",
    "SnippetResponse",
    "SnippetListResponse",
    "ContentStatsResponse",
]
