from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from src.adapter.services.route_reloader import RouteReloader
from src.domain.errors import SiteNotFound
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_site_not_found(request: Request, exc: SiteNotFound):
    # Site-owned data was requested with no current site
    error_dict = {"code": "SITE_NOT_FOUND", "message": "Internal server error"}
    logger.error(f"Site not found: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Multi-site API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import health_check, layouts, site, snippets

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(site.router, tags=["Site"])
    app.include_router(layouts.router, tags=["Layouts"])
    app.include_router(snippets.router, tags=["Snippets"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SiteNotFound, handle_site_not_found)

    def rebuild_routes():
        # Cached OpenAPI schema is rebuilt on the next request
        app.openapi_schema = None

    route_reloader = RouteReloader(delay=ApplicationConfig.ROUTE_RELOAD_DELAY)
    route_reloader.add_listener(rebuild_routes)
    app.state.route_reloader = route_reloader

    return app
