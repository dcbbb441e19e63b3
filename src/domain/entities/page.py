"""
Page Entities

Pages form the content tree of a site; a site's homepage is the root of
its tree. Parts hold the named content blocks of a page.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import PageStatus


class Page(SQLModel, table=True):
    __tablename__ = "pages"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    slug: str = Field(max_length=100)
    breadcrumb: str = Field(max_length=160)
    status: PageStatus = Field(default=PageStatus.draft)

    parent_id: Optional[int] = Field(default=None, foreign_key="pages.id")

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_page_parent", "parent_id"),)


class PagePart(SQLModel, table=True):
    __tablename__ = "page_parts"

    id: Optional[int] = Field(default=None, primary_key=True)
    page_id: Optional[int] = Field(default=None, foreign_key="pages.id", index=True)
    name: str = Field(max_length=100)
    filter_id: Optional[str] = Field(default=None, max_length=25)
    content: str = Field(default="")
