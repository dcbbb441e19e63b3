"""
List Layouts Use Case

Layouts belong to one site; only the current site's layouts are returned.
"""

from src.shared.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Layout
from src.domain.scoping import SiteContext

from .dtos import LayoutListResponse, LayoutResponse


class ListLayoutsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: SiteContext) -> Result[LayoutListResponse]:
        async with self.uow:
            layouts = await self.uow.scoped(Layout, context).find_all(order_by=[Layout.name])
            return Return.ok(
                LayoutListResponse(layouts=[LayoutResponse.from_layout(layout) for layout in layouts])
            )
