"""
Update Site Use Case
"""

from typing import Optional

from src.shared.result import Error, Result, Return
from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import ValidationFailed

from .dtos import SiteResponse, UpdateSiteCommand


class UpdateSiteUseCase:
    def __init__(
        self, uow: UnitOfWork, site_service: SiteService, dev_host: Optional[str] = None
    ):
        self.uow = uow
        self.site_service = site_service
        self.dev_host = dev_host

    async def execute(
        self, site_id: int, command: UpdateSiteCommand, actor_id: Optional[int] = None
    ) -> Result[SiteResponse]:
        async with self.uow:
            site = await self.uow.sites.get_by_id(site_id)
            if site is None:
                return Return.err(Error("UNKNOWN_SITE", "Site not found"))

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(site, field, value)

            try:
                site = await self.site_service.update(site, actor_id=actor_id)
            except ValidationFailed as exc:
                return Return.err(Error("VALIDATION_FAILED", str(exc)))

            return Return.ok(SiteResponse.from_site(site, dev_host=self.dev_host))
