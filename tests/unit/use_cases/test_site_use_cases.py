"""
Unit tests for the site management use cases
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.sites import (
    CreateSiteCommand,
    CreateSiteUseCase,
    DeleteSiteUseCase,
    GetCurrentSiteUseCase,
    ListSitesUseCase,
    UpdateSiteCommand,
    UpdateSiteUseCase,
)
from src.domain.entities import Site
from src.domain.errors import ValidationFailed
from src.domain.scoping import ScopeRegistry, SiteContext


async def _save_site(site, actor_id=None):
    if site.id is None:
        site.id = 7
    return site


def make_site(**overrides) -> Site:
    values = dict(
        id=1, name="Main", domain="", base_domain="example.com", position=1, homepage_id=10
    )
    values.update(overrides)
    return Site(**values)


@pytest.fixture
def site_service():
    service = MagicMock()
    service.create = AsyncMock(side_effect=_save_site)
    service.update = AsyncMock(side_effect=lambda site, actor_id=None: site)
    service.delete = AsyncMock()
    return service


@pytest.mark.asyncio
async def test_get_current_site():
    use_case = GetCurrentSiteUseCase(dev_host="preview")

    result = await use_case.execute(SiteContext(site=make_site(), hostname="example.com"))

    assert result.is_ok()
    assert result.value.name == "Main"
    assert result.value.url == "http://example.com/"
    assert result.value.dev_url == "http://preview.example.com/"


@pytest.mark.asyncio
async def test_get_current_site_without_site():
    result = await GetCurrentSiteUseCase().execute(SiteContext())

    assert result.is_err()
    assert result.error.code == "UNKNOWN_SITE"


@pytest.mark.asyncio
async def test_list_sites(mock_uow):
    # Arrange
    mock_uow.sites.get_all = AsyncMock(
        return_value=[make_site(), make_site(id=2, domain=r"^b\.", base_domain="b.com")]
    )
    mock_uow.sites.count = AsyncMock(return_value=2)

    # Act
    result = await ListSitesUseCase(mock_uow, registry=ScopeRegistry()).execute()

    # Assert
    assert result.is_ok()
    assert [s.id for s in result.value.sites] == [1, 2]
    assert result.value.several is True


@pytest.mark.asyncio
async def test_create_site(mock_uow, site_service):
    command = CreateSiteCommand(name="Blog", base_domain="blog.com", domain=r"^blog\.")

    result = await CreateSiteUseCase(mock_uow, site_service).execute(command, actor_id=4)

    assert result.is_ok()
    assert result.value.id == 7
    assert result.value.domain == r"^blog\."
    site = site_service.create.call_args.args[0]
    assert site.name == "Blog"
    assert site_service.create.call_args.kwargs == {"actor_id": 4}


@pytest.mark.asyncio
async def test_create_site_validation_failed(mock_uow, site_service):
    site_service.create = AsyncMock(side_effect=ValidationFailed({"name": "can't be blank"}))

    result = await CreateSiteUseCase(mock_uow, site_service).execute(
        CreateSiteCommand(name="", base_domain="blog.com")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.message == "name can't be blank"


@pytest.mark.asyncio
async def test_update_site_only_changes_given_fields(mock_uow, site_service):
    # Arrange
    site = make_site(id=3, name="Old", base_domain="old.com")
    mock_uow.sites.get_by_id = AsyncMock(return_value=site)

    # Act
    result = await UpdateSiteUseCase(mock_uow, site_service).execute(
        3, UpdateSiteCommand(name="New")
    )

    # Assert
    assert result.is_ok()
    assert result.value.name == "New"
    assert result.value.base_domain == "old.com"


@pytest.mark.asyncio
async def test_update_unknown_site(mock_uow, site_service):
    mock_uow.sites.get_by_id = AsyncMock(return_value=None)

    result = await UpdateSiteUseCase(mock_uow, site_service).execute(
        99, UpdateSiteCommand(name="New")
    )

    assert result.is_err()
    assert result.error.code == "UNKNOWN_SITE"
    site_service.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_site(mock_uow, site_service):
    site = make_site(id=3)
    mock_uow.sites.get_by_id = AsyncMock(return_value=site)

    result = await DeleteSiteUseCase(mock_uow, site_service).execute(3)

    assert result.is_ok()
    assert result.value.status == "deleted"
    site_service.delete.assert_called_once_with(site)
