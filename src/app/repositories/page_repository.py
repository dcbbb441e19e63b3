from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Page, PagePart


class IPageRepository(ABC):
    """Page repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, page_id: int) -> Optional[Page]:
        """Get page by ID"""
        pass

    @abstractmethod
    async def get_unattached_root(self) -> Optional[Page]:
        """First root page that no site uses as its homepage"""
        pass

    @abstractmethod
    async def get_parts(self, page_id: int) -> List[PagePart]:
        """Get the parts of a page"""
        pass

    @abstractmethod
    async def create(self, page: Page, parts: Optional[List[PagePart]] = None) -> Page:
        """Create a page together with its parts"""
        pass
