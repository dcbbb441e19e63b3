import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.route_reloader import RouteReloader
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.homepage_builder import HomepageBuilder
from src.app.services.site_resolver import SiteResolver
from src.app.services.site_service import SiteService
from src.depends import get_route_reloader, get_unit_of_work
from src.domain.entities import Site
from src.domain.scoping import SiteContext


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def route_reloader():
    return RouteReloader(delay=0)


@pytest.fixture
def homepage_builder():
    return HomepageBuilder(default_status="published", default_parts="body, extended")


@pytest.fixture
def uow(db_session):
    return SqlAlchemyUnitOfWork(db_session)


@pytest.fixture
def site_service(uow, homepage_builder, route_reloader):
    return SiteService(uow, homepage_builder, route_reloader)


@pytest.fixture
def resolver(uow, site_service):
    return SiteResolver(uow, site_service)


@pytest_asyncio.fixture
async def make_resolver(session_factory, homepage_builder, route_reloader):
    """Resolver on its own session, like a separate request"""
    sessions = []

    def factory():
        session = session_factory()
        sessions.append(session)
        uow = SqlAlchemyUnitOfWork(session)
        return SiteResolver(uow, SiteService(uow, homepage_builder, route_reloader))

    yield factory

    for session in sessions:
        await session.close()


@pytest_asyncio.fixture
async def create_site(site_service, uow):
    async def factory(name: str, base_domain: str, domain: str = "") -> Site:
        async with uow:
            site = await site_service.create(
                Site(name=name, base_domain=base_domain, domain=domain)
            )
            uow.detach(site)
            return site

    return factory


@pytest_asyncio.fixture
async def two_sites(create_site):
    """Two sites, A and B, each with its own request context"""
    site_a = await create_site("Site A", "a.example.com", r"^a\.")
    site_b = await create_site("Site B", "b.example.com", r"^b\.")
    return (
        SiteContext(site=site_a, hostname="a.example.com"),
        SiteContext(site=site_b, hostname="b.example.com"),
    )


@pytest_asyncio.fixture
async def client(db_session, route_reloader):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_route_reloader] = lambda: route_reloader

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
