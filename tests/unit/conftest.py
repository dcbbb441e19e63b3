import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the site and page repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.sites = MagicMock()
    uow.sites.get_by_id = AsyncMock(return_value=None)
    uow.sites.get_all = AsyncMock(return_value=[])
    uow.sites.get_by_domain = AsyncMock(return_value=None)
    uow.sites.count = AsyncMock(return_value=0)

    uow.pages = MagicMock()
    uow.pages.get_unattached_root = AsyncMock(return_value=None)
    uow.pages.create = AsyncMock()

    # Scoped repositories are built per test
    uow.scoped = MagicMock()
    uow.detach = MagicMock()
    return uow
