"""
Unit tests for the scope registry and the site_scoped decorator.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from src.domain.entities import Layout, Site, Snippet
from src.domain.scoping import ScopeRegistry, SiteContext, scope_registry, site_scoped


class Thing:
    pass


class OtherThing:
    pass


def test_register_is_idempotent():
    """Registering twice keeps the first registration"""
    registry = ScopeRegistry()

    first = registry.register(Thing)
    second = registry.register(Thing, shareable=True)

    assert second is first
    assert registry.is_shareable(Thing) is False


def test_introspection():
    registry = ScopeRegistry()
    registry.register(Thing, shareable=True)

    assert registry.is_scoped(Thing) is True
    assert registry.is_shareable(Thing) is True
    assert registry.is_scoped(OtherThing) is False
    assert registry.is_shareable(OtherThing) is False
    assert registry.get(Thing).entity_name == "Thing"


def test_content_entities_are_registered():
    assert scope_registry.is_scoped(Layout) is True
    assert scope_registry.is_shareable(Layout) is False
    assert scope_registry.is_scoped(Snippet) is True
    assert scope_registry.is_shareable(Snippet) is True
    assert scope_registry.is_scoped(Site) is False


def test_decorator_returns_class_unchanged():
    @site_scoped(shareable=True)
    class Decorated:
        pass

    assert Decorated.__name__ == "Decorated"
    assert not hasattr(Decorated, "shareable")
    assert scope_registry.is_shareable(Decorated) is True


@pytest.mark.asyncio
async def test_several_is_computed_once_until_invalidated():
    registry = ScopeRegistry()
    count_sites = AsyncMock(return_value=2)

    assert registry.several is None
    assert await registry.has_multiple(count_sites) is True
    assert await registry.has_multiple(count_sites) is True
    count_sites.assert_called_once()

    registry.invalidate_several()
    count_sites.return_value = 1

    assert await registry.has_multiple(count_sites) is False
    assert count_sites.call_count == 2


@pytest.mark.asyncio
async def test_count_started_before_invalidation_is_not_cached():
    """A site created while a count is in flight must not leave a stale answer behind"""
    # Arrange
    registry = ScopeRegistry()
    stored_sites = 1
    count_started = asyncio.Event()
    release_count = asyncio.Event()

    async def slow_count():
        seen = stored_sites
        count_started.set()
        await release_count.wait()
        return seen

    async def count():
        return stored_sites

    # Act
    reader = asyncio.create_task(registry.has_multiple(slow_count))
    await count_started.wait()
    stored_sites = 2
    registry.invalidate_several()
    release_count.set()
    stale = await reader

    # Assert
    assert stale is False
    assert registry.several is None
    assert await registry.has_multiple(count) is True
    assert registry.several is True


def test_site_context_site_id():
    assert SiteContext().site_id is None
    assert SiteContext(site=Site(id=7, name="x", base_domain="x")).site_id == 7
