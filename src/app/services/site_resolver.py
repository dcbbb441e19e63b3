"""
Site resolution

Maps the host of an inbound request to exactly one site. Resolution never
fails: when nothing matches, the catch-all site is used, and when the store
is empty a default catch-all site is created.
"""

import asyncio
import logging
import weakref
from typing import Optional

from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Site
from src.domain.errors import ValidationFailed
from src.domain.scoping import ScopeRegistry, SiteContext, scope_registry

logger = logging.getLogger(__name__)

DEFAULT_SITE_NAME = "default_site"
DEFAULT_BASE_DOMAIN = "localhost"

_catchall_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def _catchall_lock() -> asyncio.Lock:
    """Process-wide lock serializing catch-all creation (one per event loop)"""
    loop = asyncio.get_running_loop()
    lock = _catchall_locks.get(loop)
    if lock is None:
        lock = _catchall_locks[loop] = asyncio.Lock()
    return lock


class SiteResolver:
    """
    Resolves hosts to sites.

    Business Rules:
    - a site matches a host when the host equals its base_domain or its
      domain pattern matches the host
    - among matching sites the first by position wins
    - with no match the first default (empty domain) site is used
    - with no default site a catch-all is created; at most one is ever created,
      even under concurrent first requests
    """

    def __init__(
        self,
        uow: UnitOfWork,
        site_service: SiteService,
        registry: ScopeRegistry = scope_registry,
    ):
        self.uow = uow
        self.site_service = site_service
        self.registry = registry

    async def find_for_host(self, hostname: Optional[str] = None) -> Site:
        """
        Find the site serving hostname.

        Args:
            hostname: request host without port; empty or None means no host

        Returns:
            The matching site, the default site, or a newly created catch-all
        """
        async with self.uow:
            site = await self._find_for_host(hostname)
            self.uow.detach(site)
            return site

    async def catchall(self) -> Site:
        """The site with an empty domain, created if the store has none"""
        async with self.uow:
            site = await self._catchall()
            self.uow.detach(site)
            return site

    async def has_multiple(self) -> bool:
        """True when more than one site is stored (cached process-wide)"""
        async with self.uow:
            return await self.registry.has_multiple(self.uow.sites.count)

    async def context_for_host(self, hostname: Optional[str] = None) -> SiteContext:
        site = await self.find_for_host(hostname)
        return SiteContext(site=site, hostname=hostname or None)

    async def _find_for_host(self, hostname: Optional[str]) -> Site:
        logger.info(f"Finding site for host {hostname!r}")
        if not hostname:
            return await self._catchall()

        sites = await self.uow.sites.get_all()
        default = [site for site in sites if site.is_default]
        specific = [site for site in sites if not site.is_default]

        site = next((s for s in specific if s.matches(hostname)), None)
        if site is None and default:
            site = default[0]
        if site is None:
            site = await self._catchall()

        logger.info(f"Host {hostname!r} -> site {site.id} ({site.name})")
        return site

    async def _find_catchall(self) -> Optional[Site]:
        site = await self.uow.sites.get_by_domain("")
        if site is None:
            site = await self.uow.sites.get_by_domain(None)
        return site

    async def _catchall(self) -> Site:
        site = await self._find_catchall()
        if site is not None:
            return site

        async with _catchall_lock():
            site = await self._find_catchall()
            if site is not None:
                return site
            return await self._create_catchall()

    async def _create_catchall(self) -> Site:
        logger.warning("No catch-all site found, creating the default site")
        root = await self.uow.pages.get_unattached_root()
        site = Site(
            domain="",
            name=DEFAULT_SITE_NAME,
            base_domain=DEFAULT_BASE_DOMAIN,
            homepage_id=root.id if root is not None else None,
        )
        try:
            return await self.site_service.create(site)
        except ValidationFailed as exc:
            # Lost the race against another process creating the catch-all
            if "domain" not in exc.errors:
                raise
            existing = await self._find_catchall()
            if existing is None:
                raise
            logger.info(f"Using catch-all site {existing.id} created concurrently")
            return existing
