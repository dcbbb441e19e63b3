"""
Site save path.

All writes to sites go through SiteService so that every save is
validated, new sites get a homepage, the "several sites" flag is
invalidated and the route table is reloaded after commit.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from src.app.services.homepage_builder import HomepageBuilder
from src.app.services.route_reloader import IRouteReloader
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Site
from src.domain.errors import ValidationFailed
from src.domain.scoping import ScopeRegistry, scope_registry

logger = logging.getLogger(__name__)


class SiteService:
    """
    Business Rules:
    - name and base_domain must be present
    - domain must be a valid regular expression and unique across sites
    - a NULL domain is stored as "" (the catch-all)
    - new sites are appended to the end of the list
    - a site created without a homepage gets one built from the page defaults
    """

    def __init__(
        self,
        uow: UnitOfWork,
        homepage_builder: HomepageBuilder,
        route_reloader: IRouteReloader,
        registry: ScopeRegistry = scope_registry,
    ):
        self.uow = uow
        self.homepage_builder = homepage_builder
        self.route_reloader = route_reloader
        self.registry = registry

    async def validate(self, site: Site) -> None:
        if site.domain is None:
            site.domain = ""
        errors = site.validation_errors()
        existing = await self.uow.sites.get_by_domain(site.domain)
        if existing is not None and existing.id != site.id:
            errors["domain"] = "has already been taken"
        if errors:
            raise ValidationFailed(errors)

    async def create(self, site: Site, actor_id: Optional[int] = None) -> Site:
        """Validate, persist and commit a new site"""
        await self.validate(site)

        if site.position is None:
            site.position = (await self.uow.sites.max_position() or 0) + 1
        if actor_id is not None:
            site.created_by_id = actor_id
            site.updated_by_id = actor_id

        site = await self._flush(self.uow.sites.create, site)

        if site.homepage_id is None:
            page, parts = self.homepage_builder.build(site)
            page = await self.uow.pages.create(page, parts)
            site.homepage_id = page.id
            site = await self.uow.sites.update(site)

        await self.uow.commit()
        logger.info(f"Created site {site.id} ({site.name!r}, domain={site.domain!r})")
        self._after_save()
        return site

    async def update(self, site: Site, actor_id: Optional[int] = None) -> Site:
        """Validate, persist and commit changes to an existing site"""
        await self.validate(site)

        site.updated_at = datetime.utcnow()
        if actor_id is not None:
            site.updated_by_id = actor_id

        site = await self._flush(self.uow.sites.update, site)
        await self.uow.commit()
        logger.info(f"Updated site {site.id} ({site.name!r})")
        self._after_save()
        return site

    async def delete(self, site: Site) -> None:
        await self.uow.sites.delete(site)
        await self.uow.commit()
        logger.info(f"Deleted site {site.id} ({site.name!r})")
        self._after_save()

    async def _flush(self, write, site: Site) -> Site:
        try:
            return await write(site)
        except IntegrityError as exc:
            # Another writer committed the same domain after validation
            await self.uow.rollback()
            raise ValidationFailed({"domain": "has already been taken"}) from exc

    def _after_save(self) -> None:
        self.registry.invalidate_several()
        self.route_reloader.request_reload()
