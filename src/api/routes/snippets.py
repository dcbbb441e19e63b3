"""
Snippet API Routes

Snippets are visible to the site that owns them; shared snippets (no site)
are visible to every site.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import (
    ContentStatsResponse,
    ContentStatsUseCase,
    CreateSnippetCommand,
    CreateSnippetUseCase,
    ListSnippetsUseCase,
    SnippetListResponse,
    SnippetResponse,
)
from src.depends import get_site_context, get_unit_of_work
from src.domain.entities import Snippet
from src.domain.scoping import SiteContext

router = APIRouter(prefix="/snippets", tags=["Snippets"])


@router.get("", status_code=status.HTTP_200_OK, response_model=SnippetListResponse)
async def list_snippets(
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the current site's snippets and the shared ones"""
    use_case = ListSnippetsUseCase(uow)
    result = await use_case.execute(context)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SnippetResponse)
async def create_snippet(
    request: CreateSnippetCommand,
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a snippet for the current site, or a shared one with shared=true

    Raises:
        - 422 Unprocessable Entity: VALIDATION_FAILED
    """
    use_case = CreateSnippetUseCase(uow)
    result = await use_case.execute(context, request)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=ContentStatsResponse)
async def snippet_stats(
    context: SiteContext = Depends(get_site_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Count and age range of the snippets visible to the current site"""
    use_case = ContentStatsUseCase(uow, Snippet)
    result = await use_case.execute(context)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
