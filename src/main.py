"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.gw_common.errors import AppError
from src.gw_common.redis_client import close_redis, get_redis
from src.gw_common.response import error_response
from src.gw_course.api.router import router as course_router
from src.gw_gateway.middleware.request_log import RequestLogMiddleware
from src.gw_settlement.api.router import players_router, round_router
from src.gw_wagers.api.router import router as bets_router

logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify the Redis connection. Shutdown: close it."""
    redis = await get_redis()
    await redis.ping()
    yield
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(course_router, prefix="/api/v1")
app.include_router(round_router, prefix="/api/v1")
app.include_router(players_router, prefix="/api/v1")
app.include_router(bets_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
