"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from strawberry.fastapi import GraphQLRouter

from catalog_service.api import api_router
from catalog_service.config import Settings, get_settings
from catalog_service.core.exceptions import AppException
from catalog_service.core.logging import get_logger, setup_logging
from catalog_service.dependencies import get_content_context, get_library_context
from catalog_service.graphql import build_content_schema, build_library_schema
from catalog_service.schemas.common import HealthResponse
from catalog_service.storage import ContentStore, LibraryStore

logger = get_logger("main")

ERROR_STATUS = {
    "NOT_FOUND": 404,
    "CONFLICT": 409,
    "VALIDATION_ERROR": 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info("%s %s started", settings.app_name, settings.version)
    logger.info("Library GraphQL endpoint: %s", settings.graphql_path)
    logger.info("Content GraphQL endpoint: %s", settings.content_graphql_path)
    yield
    logger.info("%s stopped", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application together with a fresh pair of stores."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, colored=settings.log_colors)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory library and content catalogs over GraphQL",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.library_store = LibraryStore(id_policy=settings.id_policy, seed_data=settings.seed_data)
    app.state.content_store = ContentStore(id_policy=settings.id_policy, seed_data=settings.seed_data)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_ide = "graphiql" if settings.graphiql else None
    library_graphql = GraphQLRouter(
        build_library_schema(introspection=settings.introspection),
        graphql_ide=graphql_ide,
        context_getter=get_library_context,
    )
    content_graphql = GraphQLRouter(
        build_content_schema(introspection=settings.introspection),
        graphql_ide=graphql_ide,
        context_getter=get_content_context,
    )
    app.include_router(library_graphql, prefix=settings.graphql_path, tags=["GraphQL"])
    app.include_router(content_graphql, prefix=settings.content_graphql_path, tags=["GraphQL"])
    app.include_router(api_router)

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", app=settings.app_name)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "graphql": settings.graphql_path,
            "content_graphql": settings.content_graphql_path,
            "docs": "/docs" if settings.debug else None,
        }

    return app


def register_exception_handlers(app: FastAPI) -> None:
    settings: Settings = app.state.settings

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        return JSONResponse(
            status_code=ERROR_STATUS.get(exc.error_code, 400),
            content={
                "detail": exc.message,
                "error_code": exc.error_code,
                "details": exc.details,
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                },
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


app = create_app()
