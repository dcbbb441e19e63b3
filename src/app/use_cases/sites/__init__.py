"""
Site Management Use Cases

All site-related business logic.
"""

from .create_site_use_case import CreateSiteUseCase
from .delete_site_use_case import DeleteSiteUseCase
from .dtos import (
    CreateSiteCommand,
    DeleteSiteResponse,
    ListSitesResponse,
    SiteResponse,
    UpdateSiteCommand,
)
from .get_current_site_use_case import GetCurrentSiteUseCase
from .list_sites_use_case import ListSitesUseCase
from .update_site_use_case import UpdateSiteUseCase

__all__ = [
    "GetCurrentSiteUseCase",
    "ListSitesUseCase",
    "CreateSiteUseCase",
    "UpdateSiteUseCase",
    "DeleteSiteUseCase",
    "CreateSiteCommand",
    "UpdateSiteCommand",
    "SiteResponse",
    "ListSitesResponse",
    "DeleteSiteResponse",
]
