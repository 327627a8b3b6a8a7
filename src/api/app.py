from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from src.app.errors import IdentityProviderError, InfrastructureError
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


async def handle_infrastructure_error(request: Request, exc: InfrastructureError):
    error_dict = {"code": exc.code, "message": exc.message}
    logger.error(f"Infrastructure error on {request.url.path}: {error_dict}")
    status_code = (
        status.HTTP_502_BAD_GATEWAY
        if isinstance(exc, IdentityProviderError)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content={"error": error_dict})


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from src.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="Barbershop Admin Console API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import barbershop, dashboard, health_check, tenant, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(tenant.router, prefix=prefix, tags=["Tenant"])
    app.include_router(barbershop.router, prefix=prefix, tags=["Barbershop"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(dashboard.router, prefix=prefix, tags=["Dashboard"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(InfrastructureError, handle_infrastructure_error)

    return app
