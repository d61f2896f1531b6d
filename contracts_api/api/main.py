"""
FastAPI application - Main entry point

Run with:
  uvicorn contracts_api.api.main:create_app --factory --host 127.0.0.1 --port 3001
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from contracts_api.api.endpoints.admin import router as admin_router
from contracts_api.api.endpoints.balances import router as balances_router
from contracts_api.api.endpoints.contracts import router as contracts_router
from contracts_api.api.endpoints.jobs import router as jobs_router
from contracts_api.database.store import Store
from contracts_api.error_handler import ErrorHandler
from contracts_api.errors import ApiError
from contracts_api.utils.config_loader import AppConfig, load_app_config

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, store: Optional[Store] = None) -> FastAPI:
    config = config or load_app_config()
    logging.basicConfig(level=config.logging.level)

    if store is None:
        store = Store(
            config.database.url,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
        )
    if config.database.create_tables:
        store.create_tables()
        logger.info("Database tables initialized")

    app = FastAPI(
        title="Contracts API",
        description="Clients, contractors, contracts and jobs with balance transfers and earnings reports",
        version="1.0.0",
    )

    # handlers and controllers get the store through contracts_api.api.dependencies
    app.state.config = config
    app.state.store = store

    app.include_router(contracts_router)
    app.include_router(jobs_router)
    app.include_router(balances_router)
    app.include_router(admin_router)

    error_handler = ErrorHandler()

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        payload = error_handler.handle_exception(exc, context={"method": request.method, "path": request.url.path})
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(payload))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = [{"loc": e.get("loc"), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]
        logger.info("Invalid request on %s: %s", request.url.path, details)
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({"error": "Invalid request", "details": details}),
        )

    @app.get("/health", tags=["Health"])
    def health_check():
        try:
            store.ping()
        except SQLAlchemyError as e:
            logger.error("Health check failed: %s", e)
            return JSONResponse(
                status_code=503,
                content={"status": "unavailable", "database": "disconnected", "timestamp": datetime.utcnow().isoformat()},
            )
        return {"status": "ok", "database": "connected", "timestamp": datetime.utcnow().isoformat()}

    logger.info("Contracts API ready (database=%s)", store.engine.url.render_as_string(hide_password=True))
    return app
