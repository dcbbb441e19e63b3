"""
Site-scoped repository.

Wraps an unscoped repository and intersects every read with the site
filter before delegating:

- one site in the store: no filter at all
- shareable type: site_id = current OR site_id IS NULL
  (only site_id IS NULL when no site is resolved)
- otherwise: site_id = current, and SiteNotFound when no site is resolved

Creates of non-shareable rows without a site_id are stamped with the
current site. An explicit site_id is never overwritten.
"""

import logging
from typing import Any, List, Optional, Sequence, TypeVar

from sqlmodel import or_

from src.app.repositories.repository import IRepository, IScopedRepository
from src.app.repositories.site_repository import ISiteRepository
from src.domain.entities import Site
from src.domain.errors import SiteNotFound, ValidationFailed
from src.domain.scoping import ScopeRegistry, SiteContext, scope_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScopedRepository(IScopedRepository[T]):
    def __init__(
        self,
        base: IRepository[T],
        context: SiteContext,
        sites: ISiteRepository,
        registry: ScopeRegistry = scope_registry,
    ):
        registration = registry.get(base.entity)
        if registration is None:
            raise ValueError(f"{base.entity.__name__} is not site-scoped")
        self.base = base
        self.entity = base.entity
        self.registration = registration
        self.context = context
        self.sites = sites
        self.registry = registry

    async def several(self) -> bool:
        return await self.registry.has_multiple(self.sites.count)

    def _current_site(self) -> Site:
        if self.context.site is None:
            raise SiteNotFound(self.registration.entity_name, self.context.hostname)
        return self.context.site

    async def scope_condition(self) -> Optional[Any]:
        """Filter restricting rows to the current site, None when scoping is off"""
        if not await self.several():
            return None
        site_id = self.entity.site_id
        if self.registration.shareable:
            if self.context.site is not None:
                return or_(site_id == self.context.site.id, site_id.is_(None))
            return site_id.is_(None)
        return site_id == self._current_site().id

    async def find_all(
        self,
        *criteria: Any,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[T]:
        condition = await self.scope_condition()
        return await self.base.find_all(
            *criteria, condition, order_by=order_by, limit=limit, offset=offset
        )

    async def find_first(
        self, *criteria: Any, order_by: Optional[Sequence[Any]] = None
    ) -> Optional[T]:
        condition = await self.scope_condition()
        return await self.base.find_first(*criteria, condition, order_by=order_by)

    async def get_by_id(self, entity_id: Any) -> Optional[T]:
        return await self.find_first(self.entity.id == entity_id)

    async def count(self, *criteria: Any) -> int:
        condition = await self.scope_condition()
        return await self.base.count(*criteria, condition)

    async def average(self, column: Any, *criteria: Any) -> Optional[float]:
        condition = await self.scope_condition()
        return await self.base.average(column, *criteria, condition)

    async def minimum(self, column: Any, *criteria: Any) -> Any:
        condition = await self.scope_condition()
        return await self.base.minimum(column, *criteria, condition)

    async def maximum(self, column: Any, *criteria: Any) -> Any:
        condition = await self.scope_condition()
        return await self.base.maximum(column, *criteria, condition)

    async def sum(self, column: Any, *criteria: Any) -> Any:
        condition = await self.scope_condition()
        return await self.base.sum(column, *criteria, condition)

    async def create(self, entity: T) -> T:
        if not self.registration.shareable and entity.site_id is None:
            site = self.context.site
            if site is None and await self.several():
                site = self._current_site()
            if site is None:
                raise ValidationFailed({"site": "can't be blank"})
            entity.site_id = site.id
            logger.debug(f"Stamped new {self.registration.entity_name} with site {site.id}")
        return await self.base.create(entity)

    async def update(self, entity: T) -> T:
        return await self.base.update(entity)

    async def all_without_site(self) -> List[T]:
        return await self.base.find_all()

    async def first_without_site(self) -> Optional[T]:
        return await self.base.find_first()
