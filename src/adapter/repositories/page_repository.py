from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.page_repository import IPageRepository
from src.domain.entities import Page, PagePart, Site


class PageRepository(IPageRepository):
    """Page repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, page_id: int) -> Optional[Page]:
        """Get page by ID"""
        stmt = select(Page).where(Page.id == page_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_unattached_root(self) -> Optional[Page]:
        """First root page that no site uses as its homepage"""
        homepages = select(Site.homepage_id).where(col(Site.homepage_id).is_not(None))
        stmt = (
            select(Page)
            .where(col(Page.parent_id).is_(None), col(Page.id).not_in(homepages))
            .order_by(col(Page.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_parts(self, page_id: int) -> List[PagePart]:
        """Get the parts of a page"""
        stmt = select(PagePart).where(PagePart.page_id == page_id).order_by(col(PagePart.id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, page: Page, parts: Optional[List[PagePart]] = None) -> Page:
        """Create a page together with its parts"""
        self.session.add(page)
        await self.session.flush()
        for part in parts or []:
            part.page_id = page.id
            self.session.add(part)
        await self.session.flush()
        await self.session.refresh(page)
        return page
