"""
Site Use Case DTOs (Data Transfer Objects)

Command and Response classes for site management.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Site


# ============================================================================
# Command DTOs
# ============================================================================


class CreateSiteCommand(BaseModel):
    """Administrator request to add a site"""

    name: str
    base_domain: str
    domain: str = ""
    position: Optional[int] = None
    homepage_id: Optional[int] = None


class UpdateSiteCommand(BaseModel):
    """Changes to an existing site; unset fields are left as they are"""

    name: Optional[str] = None
    base_domain: Optional[str] = None
    domain: Optional[str] = None
    position: Optional[int] = None
    homepage_id: Optional[int] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SiteResponse(BaseModel):
    """Site details with its public and development addresses"""

    id: int
    name: str
    domain: str
    base_domain: str
    position: Optional[int]
    homepage_id: Optional[int]
    url: str
    dev_url: str

    @classmethod
    def from_site(cls, site: Site, dev_host: Optional[str] = None) -> "SiteResponse":
        return cls(
            id=site.id,
            name=site.name,
            domain=site.domain or "",
            base_domain=site.base_domain,
            position=site.position,
            homepage_id=site.homepage_id,
            url=site.url(),
            dev_url=site.dev_url(dev_host=dev_host),
        )


class ListSitesResponse(BaseModel):
    """All sites in position order"""

    sites: List[SiteResponse]
    several: bool


class DeleteSiteResponse(BaseModel):
    status: str
