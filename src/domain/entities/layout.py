"""
Layout Entity

Page layouts belong to exactly one site.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from ..scoping import site_scoped


@site_scoped()
class Layout(SQLModel, table=True):
    __tablename__ = "layouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    content: str = Field(default="")
    content_type: Optional[str] = Field(default=None, max_length=40)

    site_id: Optional[int] = Field(
        default=None, foreign_key="sites.id", nullable=False, index=True
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
