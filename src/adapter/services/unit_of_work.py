from typing import Type, TypeVar

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.page_repository import PageRepository
from src.adapter.repositories.scoped_repository import ScopedRepository
from src.adapter.repositories.site_repository import SiteRepository
from src.adapter.repositories.sqlmodel_repository import SqlModelRepository
from src.app.repositories.repository import IScopedRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.scoping import SiteContext

T = TypeVar("T")


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.sites = SiteRepository(self.session)
        self.pages = PageRepository(self.session)

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sites = SiteRepository(self.session)
        self.pages = PageRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    def scoped(self, entity: Type[T], context: SiteContext) -> IScopedRepository[T]:
        return ScopedRepository(SqlModelRepository(self.session, entity), context, self.sites)

    def detach(self, entity) -> None:
        if entity in self.session:
            self.session.expunge(entity)

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
