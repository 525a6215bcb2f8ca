"""Vote Service — the entry points the API uses for review voting."""

from protean.exceptions import ExpectedVersionError, TransactionError
from protean.utils.globals import current_domain

from ratings.exceptions import Unauthorized
from ratings.identity import Caller
from ratings.utils.logging import get_logger
from ratings.utils.storage import storage_guard
from ratings.vote.casting import CastVote
from ratings.vote.locks import keyed_locks
from ratings.vote.vote import ReviewVote, vote_value

logger = get_logger(__name__)

# Commit failures caused by another worker writing the same ballot or review
# first: a duplicate ballot key, or a stale Review version.
_COMMIT_CONFLICTS = (TransactionError, ExpectedVersionError)


def _process_cast(review_id, user_id, value, observed) -> dict:
    return current_domain.process(
        CastVote(review_id=review_id, user_id=user_id, value=value, observed=observed),
        asynchronous=False,
    )


def cast_vote(review_id, caller: Caller | None, value) -> dict:
    """Cast ``value`` on a review for ``caller`` and return the fresh counters.

    Raises Unauthorized without a caller and InvalidVoteValue for anything
    other than 1 or -1, both before touching storage. ReviewNotFound when the
    review is gone; StorageFailure when persistence fails.

    A commit that loses a race to another process is run once more from the
    same observed vote. The rerun sees the winner's ballot, so it either
    converges on it or toggles from it, and rescans the counters afresh.
    """
    if caller is None:
        raise Unauthorized()
    value = vote_value(value)

    with storage_guard("cast_vote", review_id=str(review_id), user_id=caller.id):
        # Taken before queueing on the lock: it is what the caller saw
        observed = current_domain.repository_for(ReviewVote).value_for(review_id, caller.id)

        with keyed_locks.hold(review_id):
            try:
                return _process_cast(review_id, caller.id, value, observed)
            except _COMMIT_CONFLICTS as exc:
                logger.info(
                    "vote_commit_conflict",
                    review_id=str(review_id),
                    user_id=caller.id,
                    error=type(exc).__name__,
                )
                return _process_cast(review_id, caller.id, value, observed)


def user_vote(review_id, caller: Caller | None) -> int:
    """The caller's current vote on a review: 1, -1, or 0 when none."""
    if caller is None:
        raise Unauthorized()

    with storage_guard("user_vote", review_id=str(review_id), user_id=caller.id):
        return current_domain.repository_for(ReviewVote).value_for(review_id, caller.id)
