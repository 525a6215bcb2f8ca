"""Reelvote FastAPI application.

Serves the Ratings domain over HTTP. Commands run synchronously inside the
request's domain context, so a vote's response already carries the
recomputed counters.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload

PROTEAN_ENV picks the overlay from ratings/domain.toml ("test" keeps
everything in memory, "production" uses PostgreSQL via DATABASE_URL).
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from protean.integrations.fastapi import register_exception_handlers
from ratings.domain import ratings
from ratings.utils.logging import add_context, clear_context

# Initialised once at import so every uvicorn worker shares the registry
ratings.init()

from ratings.api import ratings_router, register_error_handlers  # noqa: E402

app = FastAPI(
    title="Reelvote API",
    description="Media reviews, review votes, and vote scoring",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def ratings_context(request: Request, call_next):
    """Tag the request's log lines and push the domain context for /ratings."""
    clear_context()
    add_context(request_id=request.headers.get("X-Request-ID") or uuid.uuid4().hex, path=request.url.path)

    if not request.url.path.startswith("/ratings"):
        return await call_next(request)

    with ratings.domain_context():
        return await call_next(request)


app.include_router(ratings_router)
register_exception_handlers(app)
register_error_handlers(app)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "domain": ratings.name}
