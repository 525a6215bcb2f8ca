"""FastAPI routes for the Ratings bounded context.

Thin adapters: schema → service/command → response. Voting and review
changes go through the service modules, which own locking and error
translation; reads go straight to the repositories.

Routes that take a keyed lock are plain functions so FastAPI runs them on
its threadpool. Inside the event loop a held lock would block every other
request, and simultaneous votes would be handled one after another.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ratings.api.auth import optional_caller, required_caller
from ratings.api.schemas import (
    CastVoteRequest,
    MessageResponse,
    RatingSubmittedResponse,
    ReviewListResponse,
    ReviewResponse,
    SubmitRatingRequest,
    UserVoteResponse,
    VoteTallyResponse,
)
from ratings.exceptions import ReviewNotFound
from ratings.identity import Caller
from ratings.review import service as review_service
from ratings.review.review import Review
from ratings.vote import service as vote_service

ratings_router = APIRouter(prefix="/ratings", tags=["ratings"])


def _review_response(review: Review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        media_id=str(review.media_id),
        user_id=str(review.user_id),
        rating=review.rating,
        comment=review.comment,
        upvotes=review.upvotes,
        downvotes=review.downvotes,
        score=review.score,
        total_votes=review.total_votes,
        created_at=review.created_at.isoformat() if review.created_at else None,
        updated_at=review.updated_at.isoformat() if review.updated_at else None,
    )


# ---------------------------------------------------------------------------
# Votes
# ---------------------------------------------------------------------------
@ratings_router.post("/reviews/{review_id}/vote", response_model=VoteTallyResponse)
def vote_on_review(
    review_id: str,
    body: CastVoteRequest,
    caller: Caller | None = Depends(optional_caller),
) -> VoteTallyResponse:
    """Cast, flip, or retract the caller's vote on a review.

    A plain ``def`` so each request runs on its own worker thread: the
    caller's vote must be read before queueing on the review lock.
    """
    counts = vote_service.cast_vote(review_id, caller, body.value)
    return VoteTallyResponse(**counts)


@ratings_router.get("/reviews/{review_id}/user-vote", response_model=UserVoteResponse)
def get_user_vote(
    review_id: str,
    caller: Caller | None = Depends(optional_caller),
) -> UserVoteResponse:
    """The caller's vote on a review, 0 when they have not voted."""
    return UserVoteResponse(value=vote_service.user_vote(review_id, caller))


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
@ratings_router.get("/media/{media_id}", response_model=ReviewListResponse)
async def list_media_reviews(
    media_id: str,
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
) -> ReviewListResponse:
    """Reviews of a title, oldest first."""
    reviews = current_domain.repository_for(Review).for_media(media_id, offset=offset, limit=limit)
    return ReviewListResponse(reviews=[_review_response(r) for r in reviews])


@ratings_router.get("/me/reviews", response_model=ReviewListResponse)
async def list_my_reviews(caller: Caller = Depends(required_caller)) -> ReviewListResponse:
    """Reviews written by the caller, newest first."""
    reviews = current_domain.repository_for(Review).by_user(caller.id)
    return ReviewListResponse(reviews=[_review_response(r) for r in reviews])


@ratings_router.get("/reviews/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str) -> ReviewResponse:
    try:
        review = current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        raise ReviewNotFound(review_id) from None
    return _review_response(review)


@ratings_router.post("/{media_id}", response_model=RatingSubmittedResponse)
def submit_rating(
    media_id: str,
    body: SubmitRatingRequest,
    caller: Caller = Depends(required_caller),
) -> JSONResponse:
    """Rate a title; rating it again updates the caller's existing review."""
    result = review_service.submit_rating(media_id, caller, rating=body.rating, comment=body.comment)
    return JSONResponse(
        status_code=201 if result["created"] else 200,
        content=RatingSubmittedResponse(**result).model_dump(),
    )


@ratings_router.delete("/reviews/{review_id}", response_model=MessageResponse)
def delete_review(review_id: str, caller: Caller = Depends(required_caller)) -> MessageResponse:
    """Delete one of the caller's reviews (admins may delete any)."""
    review_service.delete_review(review_id, caller)
    return MessageResponse(message="Review deleted successfully")
