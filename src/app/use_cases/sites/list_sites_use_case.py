"""
List Sites Use Case

Returns every site in position order, plus whether there is more than one
(used by clients to decide whether to offer a site chooser).
"""

from typing import Optional

from src.shared.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.scoping import ScopeRegistry, scope_registry

from .dtos import ListSitesResponse, SiteResponse


class ListSitesUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        dev_host: Optional[str] = None,
        registry: ScopeRegistry = scope_registry,
    ):
        self.uow = uow
        self.dev_host = dev_host
        self.registry = registry

    async def execute(self) -> Result[ListSitesResponse]:
        async with self.uow:
            sites = await self.uow.sites.get_all()
            several = await self.registry.has_multiple(self.uow.sites.count)
            return Return.ok(
                ListSitesResponse(
                    sites=[SiteResponse.from_site(s, dev_host=self.dev_host) for s in sites],
                    several=several,
                )
            )
