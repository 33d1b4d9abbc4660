from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from duelcatalog.api import cards_router, decks_router, health_router
from duelcatalog.config import settings
from duelcatalog.db.database import init_db
from duelcatalog.models.errors import CatalogError


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("duelcatalog"),
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS", "PUT"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(CatalogError)
@app.exception_handler(SQLAlchemyError)
async def plain_text_error(_request: Request, exc: Exception) -> PlainTextResponse:
    """Report catalogue and storage failures as a 500 carrying the message."""
    return PlainTextResponse(str(exc), status_code=500)
