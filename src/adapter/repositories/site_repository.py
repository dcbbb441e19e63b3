from typing import List, Optional

from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.site_repository import ISiteRepository
from src.domain.entities import Site


class SiteRepository(ISiteRepository):
    """Site repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, site_id: int) -> Optional[Site]:
        """Get site by ID"""
        stmt = select(Site).where(Site.id == site_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> List[Site]:
        """Get all sites in position order"""
        stmt = select(Site).order_by(col(Site.position), col(Site.id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_domain(self, domain: Optional[str]) -> Optional[Site]:
        """Get the first site (by position) whose domain equals the value"""
        if domain is None:
            condition = col(Site.domain).is_(None)
        else:
            condition = Site.domain == domain
        stmt = (
            select(Site)
            .where(condition)
            .order_by(col(Site.position), col(Site.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self) -> int:
        """Number of stored sites"""
        stmt = select(func.count()).select_from(Site)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def max_position(self) -> Optional[int]:
        stmt = select(func.max(Site.position))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, site: Site) -> Site:
        """Create a new site"""
        self.session.add(site)
        await self.session.flush()
        await self.session.refresh(site)
        return site

    async def update(self, site: Site) -> Site:
        """Update existing site"""
        self.session.add(site)
        await self.session.flush()
        await self.session.refresh(site)
        return site

    async def delete(self, site: Site) -> None:
        """Delete a site"""
        await self.session.delete(site)
        await self.session.flush()
