"""
Site scoping registry

Entity types opt into site scoping by registering here, either with the
@site_scoped decorator or by calling enable_scoping(). Registration does
not touch the entity class; repositories consult the registry to decide
how to filter and stamp rows.

Lifecycle of the process-wide state:
- registrations are added at import time and never removed
- the "several sites" flag is computed on first use and cleared by
  invalidate_several() whenever a site is created or deleted
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Optional, Type

if TYPE_CHECKING:
    from .entities.site import Site


@dataclass(frozen=True)
class ScopeRegistration:
    """
    How one entity type is scoped.

    shareable: rows may have no site_id; such rows are visible to every site
    """

    entity: type
    shareable: bool = False

    @property
    def entity_name(self) -> str:
        return self.entity.__name__


class ScopeRegistry:
    def __init__(self):
        self._registrations: Dict[type, ScopeRegistration] = {}
        self._several: Optional[bool] = None
        self._generation = 0
        self._lock = threading.Lock()

    def register(self, entity: Type, shareable: bool = False) -> ScopeRegistration:
        """Register entity as site-scoped; registering twice keeps the first registration"""
        with self._lock:
            registration = self._registrations.get(entity)
            if registration is None:
                registration = ScopeRegistration(entity=entity, shareable=shareable)
                self._registrations[entity] = registration
            return registration

    def get(self, entity: Type) -> Optional[ScopeRegistration]:
        return self._registrations.get(entity)

    def is_scoped(self, entity: Type) -> bool:
        return entity in self._registrations

    def is_shareable(self, entity: Type) -> bool:
        registration = self._registrations.get(entity)
        return registration is not None and registration.shareable

    @property
    def several(self) -> Optional[bool]:
        """Cached answer to "is there more than one site?", None when unknown"""
        return self._several

    async def has_multiple(self, count_sites: Callable[[], Awaitable[int]]) -> bool:
        several = self._several
        if several is None:
            generation = self._generation
            several = await count_sites() > 1
            # A count started before an invalidation may be stale; do not cache it
            if generation == self._generation:
                self._several = several
        return several

    def invalidate_several(self) -> None:
        self._generation += 1
        self._several = None


scope_registry = ScopeRegistry()


def enable_scoping(entity: Type, shareable: bool = False) -> ScopeRegistration:
    return scope_registry.register(entity, shareable=shareable)


def site_scoped(shareable: bool = False):
    """
    Class decorator registering an entity type as site-scoped.

    The entity must have a site_id column referencing sites.id, nullable
    when shareable.

    Usage:
        @site_scoped(shareable=True)
        class Snippet(SQLModel, table=True):
            ...
    """

    def decorator(entity):
        enable_scoping(entity, shareable=shareable)
        return entity

    return decorator


@dataclass(frozen=True)
class SiteContext:
    """
    The site resolved for one request.

    Built once per request by SiteResolver and passed explicitly to every
    scoped repository; never shared between requests.
    """

    site: Optional["Site"] = None
    hostname: Optional[str] = None

    @property
    def site_id(self) -> Optional[int]:
        return self.site.id if self.site is not None else None
