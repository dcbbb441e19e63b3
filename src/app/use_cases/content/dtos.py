"""
Content Use Case DTOs (Data Transfer Objects)

Command and Response classes for site-scoped content (layouts, snippets).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Layout, Snippet


# ============================================================================
# Command DTOs
# ============================================================================


class CreateLayoutCommand(BaseModel):
    name: str
    content: str = ""
    content_type: Optional[str] = None


class CreateSnippetCommand(BaseModel):
    """shared=True stores the snippet without a site, visible to every site"""

    name: str
    content: str = ""
    filter_id: Optional[str] = None
    shared: bool = False


# ============================================================================
# Response DTOs
# ============================================================================


class LayoutResponse(BaseModel):
    id: int
    name: str
    content: str
    content_type: Optional[str]
    site_id: int

    @classmethod
    def from_layout(cls, layout: Layout) -> "LayoutResponse":
        return cls(
            id=layout.id,
            name=layout.name,
            content=layout.content,
            content_type=layout.content_type,
            site_id=layout.site_id,
        )


class SnippetResponse(BaseModel):
    id: int
    name: str
    content: str
    filter_id: Optional[str]
    site_id: Optional[int]
    shared: bool

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetResponse":
        return cls(
            id=snippet.id,
            name=snippet.name,
            content=snippet.content,
            filter_id=snippet.filter_id,
            site_id=snippet.site_id,
            shared=snippet.site_id is None,
        )


class LayoutListResponse(BaseModel):
    layouts: List[LayoutResponse]


class SnippetListResponse(BaseModel):
    snippets: List[SnippetResponse]


class ContentStatsResponse(BaseModel):
    """Aggregates over the rows visible to the current site"""

    count: int
    oldest: Optional[datetime]
    newest: Optional[datetime]
