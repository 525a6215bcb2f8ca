"""HTTP translation of the Ratings error taxonomy."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ratings.exceptions import (
    InvalidVoteValue,
    NotReviewOwner,
    ReviewNotFound,
    StorageFailure,
    Unauthorized,
)


async def _unauthorized(request: Request, exc: Unauthorized) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": "Unauthorized"},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _invalid_vote_value(request: Request, exc: InvalidVoteValue) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.messages})


async def _review_not_found(request: Request, exc: ReviewNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Review not found"})


async def _not_review_owner(request: Request, exc: NotReviewOwner) -> JSONResponse:
    return JSONResponse(status_code=403, content={"error": "You can only delete your own reviews"})


async def _storage_failure(request: Request, exc: StorageFailure) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Server error"})


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers for the Ratings exceptions on ``app``."""
    app.add_exception_handler(Unauthorized, _unauthorized)
    app.add_exception_handler(InvalidVoteValue, _invalid_vote_value)
    app.add_exception_handler(ReviewNotFound, _review_not_found)
    app.add_exception_handler(NotReviewOwner, _not_review_owner)
    app.add_exception_handler(StorageFailure, _storage_failure)
