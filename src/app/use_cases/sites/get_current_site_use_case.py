"""
Get Current Site Use Case

Describes the site resolved for the current request.
"""

from typing import Optional

from src.shared.result import Error, Result, Return
from src.domain.scoping import SiteContext

from .dtos import SiteResponse


class GetCurrentSiteUseCase:
    def __init__(self, dev_host: Optional[str] = None):
        self.dev_host = dev_host

    async def execute(self, context: SiteContext) -> Result[SiteResponse]:
        if context.site is None:
            return Return.err(Error("UNKNOWN_SITE", "No site resolved for this host"))
        return Return.ok(SiteResponse.from_site(context.site, dev_host=self.dev_host))
