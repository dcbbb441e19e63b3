"""
Homepage provisioning for new sites.
"""

import logging
import re
from typing import List, Optional, Tuple

from src.domain.entities import Page, PagePart, PageStatus, Site
from src.domain.text import to_slug

logger = logging.getLogger(__name__)


class HomepageBuilder:
    """
    Builds the homepage of a new site from the page defaults.

    Args:
        default_status: status name, e.g. "published" (case-insensitive)
        default_parts: comma separated part names, e.g. "body, extended"
        default_filter: text filter assigned to every part
    """

    def __init__(
        self,
        default_status: Optional[str] = None,
        default_parts: Optional[str] = None,
        default_filter: Optional[str] = None,
    ):
        self.default_status = default_status
        self.default_parts = default_parts
        self.default_filter = default_filter

    def status(self) -> PageStatus:
        status = PageStatus.lookup(self.default_status)
        if status is None:
            if self.default_status:
                logger.warning(f"Unknown default page status {self.default_status!r}")
            return PageStatus.draft
        return status

    def part_names(self) -> List[str]:
        names = re.split(r"\s*,\s*", str(self.default_parts or "").strip())
        return [name for name in names if name]

    def build(self, site: Site) -> Tuple[Page, List[PagePart]]:
        page = Page(
            title=f"{site.name} Homepage",
            slug=to_slug(site.name),
            breadcrumb="Home",
            status=self.status(),
        )
        parts = [
            PagePart(name=name, filter_id=self.default_filter)
            for name in self.part_names()
        ]
        return page, parts
