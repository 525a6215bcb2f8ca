"""VoteTally — the four vote counters derived from a review's ledger."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer

from ratings.domain import ratings
from ratings.vote.vote import VoteValue


@ratings.value_object(part_of="Review")
class VoteTally:
    """Counters for one review, always computed from the full vote set."""

    upvotes = Integer(default=0)
    downvotes = Integer(default=0)
    score = Integer(default=0)
    total_votes = Integer(default=0)

    @invariant.post
    def counters_must_agree(self):
        if self.score != self.upvotes - self.downvotes or self.total_votes != self.upvotes + self.downvotes:
            raise ValidationError({"tally": ["Vote counters are inconsistent"]})

    def as_counts(self) -> dict:
        return {
            "upvotes": self.upvotes,
            "downvotes": self.downvotes,
            "score": self.score,
            "total_votes": self.total_votes,
        }


def tally_votes(votes) -> VoteTally:
    """Recompute the counters by scanning every vote, never by patching."""
    upvotes = sum(1 for v in votes if v.value == VoteValue.UP.value)
    downvotes = sum(1 for v in votes if v.value == VoteValue.DOWN.value)
    return VoteTally(
        upvotes=upvotes,
        downvotes=downvotes,
        score=sum(v.value for v in votes),
        total_votes=upvotes + downvotes,
    )
