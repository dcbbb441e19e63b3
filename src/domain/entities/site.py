"""
Site Entity

A site is one tenant of the shared content store, addressed by hostname.
"""

import logging
import re
from datetime import datetime
from typing import Dict, Optional
from urllib.parse import urljoin

from sqlmodel import Column, DateTime, Field, Index, SQLModel

logger = logging.getLogger(__name__)

DEFAULT_DEV_HOST = "dev"


class Site(SQLModel, table=True):
    """
    Site entity - one independently addressable tenant.

    Business Rules:
    - name and base_domain are required
    - domain is a regular expression matched against the request host;
      it is unique across sites
    - the site with an empty domain is the catch-all (default) site
    - sites are always listed by position
    """

    __tablename__ = "sites"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    domain: Optional[str] = Field(default="", max_length=255)
    base_domain: str = Field(max_length=255)
    position: Optional[int] = Field(default=None)

    homepage_id: Optional[int] = Field(default=None, foreign_key="pages.id")

    # Audit
    created_by_id: Optional[int] = Field(default=None)
    updated_by_id: Optional[int] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_site_domain", "domain", unique=True),
        Index("idx_site_position", "position"),
    )

    @property
    def is_default(self) -> bool:
        return not self.domain

    def matches(self, hostname: str) -> bool:
        """True if hostname equals base_domain or the domain pattern matches it"""
        if hostname == self.base_domain:
            return True
        if not self.domain:
            return False
        try:
            return re.search(self.domain, hostname) is not None
        except re.error:
            logger.warning(f"Site {self.id} has an invalid domain pattern: {self.domain!r}")
            return False

    def url(self, path: str = "/") -> str:
        """Absolute address of path on this site, or of its root"""
        return urljoin(f"http://{self.base_domain}", path)

    def dev_url(self, path: str = "/", dev_host: Optional[str] = None) -> str:
        """Absolute address of path on the development host of this site"""
        return urljoin(f"http://{dev_host or DEFAULT_DEV_HOST}.{self.base_domain}", path)

    def validation_errors(self) -> Dict[str, str]:
        errors = {}
        if not (self.name or "").strip():
            errors["name"] = "can't be blank"
        if not (self.base_domain or "").strip():
            errors["base_domain"] = "can't be blank"
        if self.domain:
            try:
                re.compile(self.domain)
            except re.error:
                errors["domain"] = "is not a valid pattern"
        return errors
