"""CastVote — cast, flip, or retract a vote on a review.

State machine over the caller's existing vote for the review:

    unvoted        -- value -->  voted(value)     insert
    voted(value)   -- value -->  unvoted          delete (toggle-off)
    voted(other)   -- value -->  voted(value)     overwrite in place

After the ledger write the review's counters are recomputed from every vote
on it and written back in the same unit of work.

``observed`` is the vote the caller saw when the request arrived. When the
ledger has meanwhile moved to exactly the state this request was heading
for, a concurrent twin already did the work and the ledger is left alone.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ratings.domain import ratings
from ratings.exceptions import ReviewNotFound
from ratings.review.review import Review
from ratings.utils.logging import get_logger
from ratings.vote.tally import tally_votes
from ratings.vote.vote import NO_VOTE, ReviewVote, vote_value

logger = get_logger(__name__)


def target_state(current: int, value: int) -> int:
    """The vote a user ends up with after casting ``value`` from ``current``."""
    return NO_VOTE if current == value else value


@ratings.command(part_of="ReviewVote")
class CastVote:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    value = Float(required=True)  # Checked to be exactly 1 or -1 by the handler
    observed = Integer()


@ratings.command_handler(part_of=ReviewVote)
class CastVoteHandler:
    @handle(CastVote)
    def cast_vote(self, command):
        value = vote_value(command.value)

        review_repo = current_domain.repository_for(Review)
        try:
            review = review_repo.get(command.review_id)
        except ObjectNotFoundError:
            raise ReviewNotFound(command.review_id) from None

        ledger = current_domain.repository_for(ReviewVote)
        log = logger.bind(review_id=str(command.review_id), user_id=str(command.user_id))

        existing = ledger.find_one(command.review_id, command.user_id)
        current = existing.value if existing else NO_VOTE

        if (
            command.observed is not None
            and current != command.observed
            and current == target_state(command.observed, value)
        ):
            log.info("vote_converged", value=current)
        elif existing is None:
            ledger.insert(command.review_id, command.user_id, value)
            log.info("vote_cast", value=value)
        elif existing.value == value:
            ledger.delete(existing)
            log.info("vote_retracted", value=value)
        else:
            ledger.update_value(existing, value)
            log.info("vote_flipped", previous=current, value=value)

        tally = tally_votes(ledger.find_all(command.review_id))
        review.record_tally(tally)
        review_repo.add(review)

        return tally.as_counts()
