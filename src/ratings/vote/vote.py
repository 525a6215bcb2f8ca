"""ReviewVote aggregate — one user's directional vote on one review.

A vote is keyed by its ballot, the (review, user) pair, so the store can
hold at most one record per pair no matter how requests interleave.
"""

from datetime import UTC, datetime
from enum import Enum
from numbers import Real

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from ratings.domain import ratings
from ratings.exceptions import InvalidVoteValue

# Vote value reported for a user who has not voted
NO_VOTE = 0


class VoteValue(Enum):
    UP = 1
    DOWN = -1


VOTE_VALUES = frozenset(v.value for v in VoteValue)


def vote_value(raw) -> int:
    """Return ``raw`` as +1 or -1, or raise InvalidVoteValue.

    Anything that is not numerically exactly one or minus one is refused,
    including 0, fractions, booleans, and non-numbers.
    """
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidVoteValue(raw)
    if raw not in VOTE_VALUES:
        raise InvalidVoteValue(raw)
    return int(raw)


def ballot_id_for(review_id, user_id) -> str:
    return f"{review_id}:{user_id}"


@ratings.aggregate
class ReviewVote:
    ballot_id = Identifier(identifier=True)
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    value = Integer(required=True)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def value_must_be_a_unit(self):
        if self.value is not None and self.value not in VOTE_VALUES:
            raise ValidationError({"value": ["Vote value must be 1 or -1"]})

    @classmethod
    def cast(cls, review_id, user_id, value):
        now = datetime.now(UTC)
        return cls(
            ballot_id=ballot_id_for(review_id, user_id),
            review_id=review_id,
            user_id=user_id,
            value=vote_value(value),
            created_at=now,
            updated_at=now,
        )

    def change_to(self, value):
        """Flip the vote in place; the ballot keeps its identity."""
        self.value = vote_value(value)
        self.updated_at = datetime.now(UTC)
