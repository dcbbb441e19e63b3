"""
Content Stats Use Case

Count and age range of the layouts or snippets visible to the current site.
"""

from typing import Type, Union

from src.shared.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Layout, Snippet
from src.domain.scoping import SiteContext

from .dtos import ContentStatsResponse


class ContentStatsUseCase:
    def __init__(self, uow: UnitOfWork, entity: Type[Union[Layout, Snippet]]):
        self.uow = uow
        self.entity = entity

    async def execute(self, context: SiteContext) -> Result[ContentStatsResponse]:
        async with self.uow:
            repository = self.uow.scoped(self.entity, context)
            return Return.ok(
                ContentStatsResponse(
                    count=await repository.count(),
                    oldest=await repository.minimum(self.entity.created_at),
                    newest=await repository.maximum(self.entity.created_at),
                )
            )
