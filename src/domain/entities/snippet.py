"""
Snippet Entity

Reusable content fragments. A snippet with no site is shared by all sites.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from ..scoping import site_scoped


@site_scoped(shareable=True)
class Snippet(SQLModel, table=True):
    __tablename__ = "snippets"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    content: str = Field(default="")
    filter_id: Optional[str] = Field(default=None, max_length=25)

    site_id: Optional[int] = Field(default=None, foreign_key="sites.id", index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
