"""
Layout API Routes

Layouts belong to the site serving the request host.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import (
    ContentStatsResponse,
    ContentStatsUseCase,
    CreateLayoutCommand,
    CreateLayoutUseCase,
    LayoutListResponse,
    LayoutResponse,
    ListLayoutsUseCase,
)
from src.depends import get_site_context, get_unit_of_work
from src.domain.entities import Layout
from src.domain.scoping import SiteContext

router = APIRouter(prefix="/layouts", tags=["Layouts"])


@router.get("", status_code=status.HTTP_200_OK, response_model=LayoutListResponse)
async def list_layouts(
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List the current site's layouts

    Raises:
        - 500 Internal Server Error: SITE_NOT_FOUND when no site is resolved
    """
    use_case = ListLayoutsUseCase(uow)
    result = await use_case.execute(context)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LayoutResponse)
async def create_layout(
    request: CreateLayoutCommand,
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a layout owned by the current site

    Raises:
        - 422 Unprocessable Entity: VALIDATION_FAILED
        - 500 Internal Server Error: SITE_NOT_FOUND when no site is resolved
    """
    use_case = CreateLayoutUseCase(uow)
    result = await use_case.execute(context, request)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=ContentStatsResponse)
async def layout_stats(
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Count and age range of the current site's layouts"""
    use_case = ContentStatsUseCase(uow, Layout)
    result = await use_case.execute(context)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
