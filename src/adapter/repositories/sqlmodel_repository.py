"""
Generic SQLModel repository.

Plain, unscoped data access over one entity type. Callers narrow queries
by passing SQLAlchemy criteria, e.g. repo.find_all(Layout.name == "main").
"""

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.repository import IRepository

T = TypeVar("T")


class SqlModelRepository(IRepository[T], Generic[T]):
    """Unscoped repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, entity: Type[T]):
        self.session = session
        self.entity = entity

    def _where(self, stmt, criteria: Sequence[Any]):
        criteria = [c for c in criteria if c is not None]
        if criteria:
            stmt = stmt.where(*criteria)
        return stmt

    async def find_all(
        self,
        *criteria: Any,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[T]:
        stmt = self._where(select(self.entity), criteria)
        stmt = stmt.order_by(*(order_by or [self.entity.id]))
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_first(
        self, *criteria: Any, order_by: Optional[Sequence[Any]] = None
    ) -> Optional[T]:
        rows = await self.find_all(*criteria, order_by=order_by, limit=1)
        return rows[0] if rows else None

    async def _aggregate(self, expression, criteria: Sequence[Any]) -> Any:
        stmt = self._where(select(expression).select_from(self.entity), criteria)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count(self, *criteria: Any) -> int:
        return await self._aggregate(func.count(), criteria)

    async def average(self, column: Any, *criteria: Any) -> Optional[float]:
        return await self._aggregate(func.avg(column), criteria)

    async def minimum(self, column: Any, *criteria: Any) -> Any:
        return await self._aggregate(func.min(column), criteria)

    async def maximum(self, column: Any, *criteria: Any) -> Any:
        return await self._aggregate(func.max(column), criteria)

    async def sum(self, column: Any, *criteria: Any) -> Any:
        return await self._aggregate(func.sum(column), criteria)

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
