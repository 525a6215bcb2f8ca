"""Pydantic request/response schemas for the Ratings API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictFloat, StrictInt


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CastVoteRequest(BaseModel):
    value: StrictInt | StrictFloat  # 1 or -1; anything else is refused by the service


class SubmitRatingRequest(BaseModel):
    rating: int = Field(ge=1, le=10)
    comment: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class VoteTallyResponse(BaseModel):
    upvotes: int
    downvotes: int
    score: int
    total_votes: int


class UserVoteResponse(BaseModel):
    value: int


class RatingSubmittedResponse(BaseModel):
    review_id: str
    created: bool


class ReviewResponse(BaseModel):
    review_id: str
    media_id: str
    user_id: str
    rating: int
    comment: str | None = None
    upvotes: int = 0
    downvotes: int = 0
    score: int = 0
    total_votes: int = 0
    created_at: str | None = None
    updated_at: str | None = None


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]


class MessageResponse(BaseModel):
    message: str
