from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.route_reloader import RouteReloader
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.homepage_builder import HomepageBuilder
from src.app.services.site_resolver import SiteResolver
from src.app.services.site_service import SiteService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.scoping import SiteContext

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

homepage_builder = HomepageBuilder(
    default_status=ApplicationConfig.DEFAULT_PAGE_STATUS,
    default_parts=ApplicationConfig.DEFAULT_PAGE_PARTS,
    default_filter=ApplicationConfig.DEFAULT_PAGE_FILTER,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_route_reloader(request: Request) -> RouteReloader:
    """The reloader of the application serving the request (set by create_app)"""
    return request.app.state.route_reloader


def get_site_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    reloader: RouteReloader = Depends(get_route_reloader),
) -> SiteService:
    return SiteService(uow, homepage_builder, reloader)


async def get_site_context(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    site_service: SiteService = Depends(get_site_service),
) -> SiteContext:
    """
    Dependency resolving the site of the current request from its host.

    Resolved once per request; never cached across requests.
    """
    resolver = SiteResolver(uow, site_service)
    return await resolver.context_for_host(request.url.hostname)
