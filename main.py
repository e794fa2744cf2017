from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from core.errors import InvalidInputError, NotAuthenticatedError, SimulatedAuthError, ValidationError
from core.session import Session
from services.db import dispose_engine
from services.repositories import Repositories
from services.storage import KeyValueStore, build_store
from api.v1.router import api_router

_LOG = logging.getLogger(__name__)


def create_app(
    store: KeyValueStore | None = None,
    auth_delay: float | None = None,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        repos = Repositories(store if store is not None else await build_store())
        session = Session(repos.profiles, auth_delay=auth_delay)
        await session.restore()
        app.state.repos = repos
        app.state.session = session
        app.state.today = today
        _LOG.info("MetaFit API up (env=%s, session=%s)", settings.env_name, session.state.value)
        yield
        if store is None:
            # only an engine this app created itself
            await dispose_engine()

    app = FastAPI(title="MetaFit API", version="1.0.0", lifespan=lifespan)

    # CORS (public demo only – lock down in prod)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def _validation(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.errors})

    @app.exception_handler(SimulatedAuthError)
    async def _bad_credentials(_: Request, exc: SimulatedAuthError) -> JSONResponse:
        _LOG.warning("auth rejected: %s", exc)
        return JSONResponse(status_code=401, content={"detail": "Invalid credentials"})

    @app.exception_handler(NotAuthenticatedError)
    async def _anonymous(_: Request, exc: NotAuthenticatedError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"detail": "Not authenticated"})

    @app.exception_handler(InvalidInputError)
    async def _invalid(_: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()
