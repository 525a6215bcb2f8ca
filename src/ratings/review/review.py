"""Review aggregate — a user's rating and comment on a catalogued title.

Besides its content, a Review carries four vote counters (upvotes,
downvotes, score, total_votes). They are a cache of the vote ledger and are
only ever replaced wholesale through ``record_tally``.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text

from ratings.domain import ratings
from ratings.review.events import ReviewRevised, ReviewSubmitted, ReviewVotesTallied

MIN_RATING = 1
MAX_RATING = 10


@ratings.aggregate
class Review:
    """One user's review of one title."""

    media_id = Identifier(required=True)
    user_id = Identifier(required=True)

    # Content
    rating = Integer(required=True)
    comment = Text()

    # Vote counters, derived from the ReviewVote ledger
    upvotes = Integer(default=0)
    downvotes = Integer(default=0)
    score = Integer(default=0)
    total_votes = Integer(default=0)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    @invariant.post
    def vote_counters_must_agree(self):
        if self.score != self.upvotes - self.downvotes:
            raise ValidationError({"score": ["Score must equal upvotes minus downvotes"]})
        if self.total_votes != self.upvotes + self.downvotes:
            raise ValidationError({"total_votes": ["Total votes must equal upvotes plus downvotes"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(cls, media_id, user_id, rating, comment=None):
        """Submit a new review."""
        now = datetime.now(UTC)

        review = cls(
            media_id=media_id,
            user_id=user_id,
            rating=rating,
            comment=comment,
            upvotes=0,
            downvotes=0,
            score=0,
            total_votes=0,
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                media_id=str(media_id),
                user_id=str(user_id),
                rating=rating,
                comment=comment,
                submitted_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Revision
    # -------------------------------------------------------------------
    def revise(self, rating, comment=None):
        """Replace the rating. An empty comment keeps the current one."""
        now = datetime.now(UTC)

        with atomic_change(self):
            self.rating = rating
            if comment:
                self.comment = comment
            self.updated_at = now

        self.raise_(
            ReviewRevised(
                review_id=str(self.id),
                rating=self.rating,
                comment=self.comment,
                revised_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Vote counters
    # -------------------------------------------------------------------
    def record_tally(self, tally):
        """Overwrite all four vote counters from a freshly computed tally."""
        now = datetime.now(UTC)

        with atomic_change(self):
            self.upvotes = tally.upvotes
            self.downvotes = tally.downvotes
            self.score = tally.score
            self.total_votes = tally.total_votes
            self.updated_at = now

        self.raise_(
            ReviewVotesTallied(
                review_id=str(self.id),
                upvotes=self.upvotes,
                downvotes=self.downvotes,
                score=self.score,
                total_votes=self.total_votes,
                tallied_at=now,
            )
        )

    def is_owned_by(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)
