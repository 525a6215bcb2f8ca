"""Entry points the API uses to manage reviews."""

from protean.utils.globals import current_domain

from ratings.exceptions import Unauthorized
from ratings.identity import Caller
from ratings.review.deletion import DeleteReview
from ratings.review.submission import SubmitRating
from ratings.utils.storage import storage_guard
from ratings.vote.locks import keyed_locks


def submit_rating(media_id, caller: Caller | None, rating: int, comment: str | None = None) -> dict:
    if caller is None:
        raise Unauthorized()

    with storage_guard("submit_rating", media_id=str(media_id), user_id=caller.id):
        # One review per user and title: serialise that user's submissions
        with keyed_locks.hold(f"{media_id}:{caller.id}"):
            return current_domain.process(
                SubmitRating(media_id=media_id, user_id=caller.id, rating=rating, comment=comment),
                asynchronous=False,
            )


def delete_review(review_id, caller: Caller | None) -> None:
    """Delete a review; waits out any vote being cast on it."""
    if caller is None:
        raise Unauthorized()

    with storage_guard("delete_review", review_id=str(review_id), user_id=caller.id):
        with keyed_locks.hold(review_id):
            current_domain.process(
                DeleteReview(review_id=review_id, user_id=caller.id, is_admin=caller.is_admin),
                asynchronous=False,
            )
