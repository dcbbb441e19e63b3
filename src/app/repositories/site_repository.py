from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Site


class ISiteRepository(ABC):
    """Site repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, site_id: int) -> Optional[Site]:
        """Get site by ID"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Site]:
        """Get all sites in position order"""
        pass

    @abstractmethod
    async def get_by_domain(self, domain: Optional[str]) -> Optional[Site]:
        """Get the first site (by position) whose domain equals the value; None matches NULL"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored sites"""
        pass

    @abstractmethod
    async def max_position(self) -> Optional[int]:
        """Highest position in use, None when there are no sites"""
        pass

    @abstractmethod
    async def create(self, site: Site) -> Site:
        """Create a new site"""
        pass

    @abstractmethod
    async def update(self, site: Site) -> Site:
        """Update existing site"""
        pass

    @abstractmethod
    async def delete(self, site: Site) -> None:
        """Delete a site"""
        pass
