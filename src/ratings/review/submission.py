"""SubmitRating — rate a title, or re-rate it.

A user holds at most one review per title: submitting again updates the
existing review's rating, and its comment when a new one is given.
"""

from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ratings.domain import ratings
from ratings.review.review import Review


@ratings.command(part_of="Review")
class SubmitRating:
    media_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()


@ratings.command_handler(part_of=Review)
class SubmitRatingHandler:
    @handle(SubmitRating)
    def submit_rating(self, command):
        repo = current_domain.repository_for(Review)

        review = repo.find_for(command.media_id, command.user_id)
        if review is not None:
            review.revise(rating=command.rating, comment=command.comment)
            repo.add(review)
            return {"review_id": str(review.id), "created": False}

        review = Review.submit(
            media_id=command.media_id,
            user_id=command.user_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(review)
        return {"review_id": str(review.id), "created": True}
