"""
Generic repository interfaces.

IRepository is the plain data access capability over one entity type.
IScopedRepository adds site scoping on top of it: every read is restricted
to the current site (plus shared rows for shareable types) and creates are
stamped with the current site.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Unscoped repository over one entity type"""

    entity: type

    @abstractmethod
    async def find_all(
        self,
        *criteria: Any,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[T]:
        pass

    @abstractmethod
    async def find_first(
        self, *criteria: Any, order_by: Optional[Sequence[Any]] = None
    ) -> Optional[T]:
        pass

    @abstractmethod
    async def count(self, *criteria: Any) -> int:
        pass

    @abstractmethod
    async def average(self, column: Any, *criteria: Any) -> Optional[float]:
        pass

    @abstractmethod
    async def minimum(self, column: Any, *criteria: Any) -> Any:
        pass

    @abstractmethod
    async def maximum(self, column: Any, *criteria: Any) -> Any:
        pass

    @abstractmethod
    async def sum(self, column: Any, *criteria: Any) -> Any:
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        pass


class IScopedRepository(IRepository[T]):
    """Site-scoped repository; reads and creates honor the request's site"""

    @abstractmethod
    async def get_by_id(self, entity_id: Any) -> Optional[T]:
        """Get a row by ID, only if visible to the current site"""
        pass

    @abstractmethod
    async def all_without_site(self) -> List[T]:
        """Every row of every site. For maintenance tasks only."""
        pass

    @abstractmethod
    async def first_without_site(self) -> Optional[T]:
        """First row regardless of site. For maintenance tasks only."""
        pass
