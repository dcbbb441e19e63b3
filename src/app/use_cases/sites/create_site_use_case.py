"""
Create Site Use Case

Administrator adds a new site. The site gets a homepage built from the page
defaults unless an existing page is given.
"""

from typing import Optional

from src.shared.result import Error, Result, Return
from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Site
from src.domain.errors import ValidationFailed

from .dtos import CreateSiteCommand, SiteResponse


class CreateSiteUseCase:
    """
    Business Logic:
    1. Build the site from the command
    2. Validate and persist it (SiteService)
    3. Return the stored site

    Errors:
        - VALIDATION_FAILED: missing name/base_domain, bad or duplicate domain
    """

    def __init__(
        self, uow: UnitOfWork, site_service: SiteService, dev_host: Optional[str] = None
    ):
        self.uow = uow
        self.site_service = site_service
        self.dev_host = dev_host

    async def execute(
        self, command: CreateSiteCommand, actor_id: Optional[int] = None
    ) -> Result[SiteResponse]:
        async with self.uow:
            site = Site(
                name=command.name,
                base_domain=command.base_domain,
                domain=command.domain,
                position=command.position,
                homepage_id=command.homepage_id,
            )
            try:
                site = await self.site_service.create(site, actor_id=actor_id)
            except ValidationFailed as exc:
                return Return.err(Error("VALIDATION_FAILED", str(exc)))

            return Return.ok(SiteResponse.from_site(site, dev_host=self.dev_host))
