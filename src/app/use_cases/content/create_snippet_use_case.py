"""
Create Snippet Use Case

Snippets are shareable: a shared snippet has no site and is visible to
every site, otherwise it belongs to the current site.
"""

from src.shared.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Snippet
from src.domain.scoping import SiteContext

from .dtos import CreateSnippetCommand, SnippetResponse


class CreateSnippetUseCase:
    """
    Errors:
        - VALIDATION_FAILED: blank name, or a site snippet with no current site
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: SiteContext, command: CreateSnippetCommand
    ) -> Result[SnippetResponse]:
        async with self.uow:
            if not command.name.strip():
                return Return.err(Error("VALIDATION_FAILED", "name can't be blank"))
            if not command.shared and context.site is None:
                return Return.err(Error("VALIDATION_FAILED", "site can't be blank"))

            snippet = Snippet(
                name=command.name,
                content=command.content,
                filter_id=command.filter_id,
                site_id=None if command.shared else context.site_id,
            )
            snippet = await self.uow.scoped(Snippet, context).create(snippet)
            await self.uow.commit()
            return Return.ok(SnippetResponse.from_snippet(snippet))
