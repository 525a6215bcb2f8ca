"""DeleteReview — remove a review together with the votes cast on it.

Only the review's author, or an admin, may delete it.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ratings.domain import ratings
from ratings.exceptions import NotReviewOwner, ReviewNotFound
from ratings.review.review import Review
from ratings.utils.logging import get_logger
from ratings.vote.vote import ReviewVote

logger = get_logger(__name__)


@ratings.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    is_admin = Boolean(default=False)


@ratings.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        try:
            review = repo.get(command.review_id)
        except ObjectNotFoundError:
            raise ReviewNotFound(command.review_id) from None

        if not (command.is_admin or review.is_owned_by(command.user_id)):
            raise NotReviewOwner(command.review_id, command.user_id)

        purged = current_domain.repository_for(ReviewVote).purge(command.review_id)
        repo._dao.delete(review)

        logger.info(
            "review_deleted",
            review_id=str(command.review_id),
            deleted_by=str(command.user_id),
            votes_purged=purged,
        )
