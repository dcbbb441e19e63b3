import pytest

from src.domain.scoping import scope_registry


@pytest.fixture(autouse=True)
def reset_several_sites_flag():
    # The flag is process-wide; every test starts from its own store
    scope_registry.invalidate_several()
    yield
    scope_registry.invalidate_several()
