"""
List Snippets Use Case

Returns the current site's snippets together with the shared ones.
"""

from src.shared.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Snippet
from src.domain.scoping import SiteContext

from .dtos import SnippetListResponse, SnippetResponse


class ListSnippetsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: SiteContext) -> Result[SnippetListResponse]:
        async with self.uow:
            snippets = await self.uow.scoped(Snippet, context).find_all(
                order_by=[Snippet.name, Snippet.id]
            )
            return Return.ok(
                SnippetListResponse(
                    snippets=[SnippetResponse.from_snippet(s) for s in snippets]
                )
            )
