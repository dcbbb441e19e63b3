"""
Site API Routes

GET /site answers with the site serving the request host.
/sites endpoints are for administrators and require the admin API key.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sites import (
    CreateSiteCommand,
    CreateSiteUseCase,
    DeleteSiteResponse,
    DeleteSiteUseCase,
    GetCurrentSiteUseCase,
    ListSitesResponse,
    ListSitesUseCase,
    SiteResponse,
    UpdateSiteCommand,
    UpdateSiteUseCase,
)
from src.depends import get_site_context, get_site_service, get_unit_of_work
from src.domain.scoping import SiteContext

router = APIRouter(tags=["Site"])


@router.get("/site", status_code=status.HTTP_200_OK, response_model=SiteResponse)
async def get_current_site(context: SiteContext = Depends(get_site_context)):
    """
    Current Site

    Resolves the request host to a site: exact base_domain match or domain
    pattern match, else the catch-all site (created on first use).
    """
    use_case = GetCurrentSiteUseCase(dev_host=ApplicationConfig.DEV_HOST)
    result = await use_case.execute(context)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/sites",
    status_code=status.HTTP_200_OK,
    response_model=ListSitesResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def list_sites(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Sites

    Requires: X-Admin-API-Key header
    """
    use_case = ListSitesUseCase(uow, dev_host=ApplicationConfig.DEV_HOST)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/sites",
    status_code=status.HTTP_201_CREATED,
    response_model=SiteResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def create_site(
    request: CreateSiteCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    site_service: SiteService = Depends(get_site_service),
):
    """
    Create Site

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 422 Unprocessable Entity: VALIDATION_FAILED
    """
    use_case = CreateSiteUseCase(uow, site_service, dev_host=ApplicationConfig.DEV_HOST)
    result = await use_case.execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/sites/{site_id}",
    status_code=status.HTTP_200_OK,
    response_model=SiteResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def update_site(
    site_id: int,
    request: UpdateSiteCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    site_service: SiteService = Depends(get_site_service),
):
    """
    Update Site

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: UNKNOWN_SITE
        - 422 Unprocessable Entity: VALIDATION_FAILED
    """
    use_case = UpdateSiteUseCase(uow, site_service, dev_host=ApplicationConfig.DEV_HOST)
    result = await use_case.execute(site_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/sites/{site_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteSiteResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def delete_site(
    site_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    site_service: SiteService = Depends(get_site_service),
):
    """
    Delete Site

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: UNKNOWN_SITE
    """
    use_case = DeleteSiteUseCase(uow, site_service)
    result = await use_case.execute(site_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
