"""
Create Layout Use Case

New layouts are stamped with the current site.
"""

from src.shared.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Layout
from src.domain.errors import ValidationFailed
from src.domain.scoping import SiteContext

from .dtos import CreateLayoutCommand, LayoutResponse


class CreateLayoutUseCase:
    """
    Errors:
        - VALIDATION_FAILED: blank name, or no site to own the layout
    Raises:
        SiteNotFound: several sites exist and none is resolved
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: SiteContext, command: CreateLayoutCommand
    ) -> Result[LayoutResponse]:
        async with self.uow:
            if not command.name.strip():
                return Return.err(Error("VALIDATION_FAILED", "name can't be blank"))

            layout = Layout(
                name=command.name,
                content=command.content,
                content_type=command.content_type,
            )
            try:
                layout = await self.uow.scoped(Layout, context).create(layout)
            except ValidationFailed as exc:
                return Return.err(Error("VALIDATION_FAILED", str(exc)))

            await self.uow.commit()
            return Return.ok(LayoutResponse.from_layout(layout))
