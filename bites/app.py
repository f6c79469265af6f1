from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import redis
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .cuisines.router import router as cuisines_router
from .responses import error_response
from .restaurants.router import router as restaurants_router
from .reviews.router import router as reviews_router
from .store.bootstrap import bootstrap_store
from .store.client import close_client, get_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Search index and Bloom filter must exist before the first request
    try:
        bootstrap_store(get_client())
    except RedisError:
        logger.warning("Store bootstrap failed at startup", exc_info=True)
    yield
    close_client()


app = FastAPI(title="Bites Restaurant Directory API", version="1.0.0", lifespan=lifespan)

app.include_router(restaurants_router)
app.include_router(reviews_router)
app.include_router(cuisines_router)


# ── Error envelope ───────────────────────────────────────────────────────


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(422, jsonable_encoder(exc.errors()))


@app.exception_handler(RedisError)
async def redis_exception_handler(request: Request, exc: RedisError):
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal Server Error")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health(client: redis.Redis = Depends(get_client)):
    try:
        client.ping()
    except RedisError:
        logger.warning("Health check could not reach the store", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "store": "unreachable"},
        )
    return {"status": "ok", "store": "ok"}
