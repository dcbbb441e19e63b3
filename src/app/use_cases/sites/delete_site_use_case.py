"""
Delete Site Use Case
"""

from src.shared.result import Error, Result, Return
from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteSiteResponse


class DeleteSiteUseCase:
    def __init__(self, uow: UnitOfWork, site_service: SiteService):
        self.uow = uow
        self.site_service = site_service

    async def execute(self, site_id: int) -> Result[DeleteSiteResponse]:
        async with self.uow:
            site = await self.uow.sites.get_by_id(site_id)
            if site is None:
                return Return.err(Error("UNKNOWN_SITE", "Site not found"))

            await self.site_service.delete(site)
            return Return.ok(DeleteSiteResponse(status="deleted"))
