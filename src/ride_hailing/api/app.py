from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from ride_hailing.api.dependencies import HandlersDep, StoresDep, build_lifespan
from ride_hailing.config import get_settings
from ride_hailing.dto import HealthCheckResponse
from ride_hailing.handlers import GatewayRequest
from ride_hailing.protocols import DocumentStore
from ride_hailing.results import MESSAGE_METHOD_NOT_ALLOWED

# Verbs passed to the entity handler, which answers 405 for the ones it does not serve
ALL_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]


def create_app(stores: Mapping[str, DocumentStore] | None = None) -> FastAPI:
    """Create the API application.

    Args:
        stores: Stores to serve, keyed by entity. If None, MongoDB
            collections are opened from settings at startup.
    """
    app = FastAPI(
        title="Ride Hailing Records API",
        description="Drivers, rides, users and payments backed by MongoDB",
        version="0.1.0",
        lifespan=build_lifespan(stores),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
        """Answer verbs outside ALL_METHODS the way the handlers answer 405."""
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        return Response(
            MESSAGE_METHOD_NOT_ALLOWED,
            status_code=exc.status_code,
            headers=exc.headers,
            media_type="text/plain",
        )

    @app.get("/")
    async def root(handlers: HandlersDep) -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Ride Hailing Records API",
            "version": "0.1.0",
            "endpoints": {entity: f"/{entity}" for entity in handlers},
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(stores: StoresDep) -> JSONResponse:
        """Health check endpoint."""
        results = {}
        for entity, store in stores.items():
            results[entity] = await run_in_threadpool(store.health_check)
        healthy = all(results.values())
        body = HealthCheckResponse(
            status="healthy" if healthy else "unhealthy",
            stores=results,
        )
        return JSONResponse(
            content=body.model_dump(),
            status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @app.api_route("/{entity}", methods=ALL_METHODS)
    async def records(entity: str, request: Request, handlers: HandlersDep) -> Response:
        """Pass the request to the entity's handler and relay its response."""
        handler = handlers.get(entity)
        if handler is None:
            return Response("Not found", status_code=status.HTTP_404_NOT_FOUND, media_type="text/plain")

        gateway_request = GatewayRequest(
            method=request.method,
            query=dict(request.query_params),
            body=await request.body(),
        )
        # pymongo calls block
        result = await run_in_threadpool(handler.handle, gateway_request)
        return Response(
            content=result.body,
            status_code=result.status_code,
            media_type=result.content_type,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from ride_hailing.logging_setup import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    uvicorn.run(
        "ride_hailing.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
