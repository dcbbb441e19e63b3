from abc import ABC, abstractmethod
from typing import Type, TypeVar

from src.app.repositories.page_repository import IPageRepository
from src.app.repositories.repository import IScopedRepository
from src.app.repositories.site_repository import ISiteRepository
from src.domain.scoping import SiteContext

T = TypeVar("T")


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sites: ISiteRepository
    pages: IPageRepository

    @abstractmethod
    def scoped(self, entity: Type[T], context: SiteContext) -> IScopedRepository[T]:
        """Site-scoped repository for entity, bound to the request's site"""
        pass

    @abstractmethod
    def detach(self, entity) -> None:
        """Stop tracking entity so it stays usable after the unit of work ends"""
        pass

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
