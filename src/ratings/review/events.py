"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer, Text

from ratings.domain import ratings


@ratings.event(part_of="Review")
class ReviewSubmitted:
    """A user rated a title for the first time."""

    __version__ = 1

    review_id = Identifier(required=True)
    media_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    submitted_at = DateTime(required=True)


@ratings.event(part_of="Review")
class ReviewRevised:
    """A user changed the rating or comment on their existing review."""

    __version__ = 1

    review_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    revised_at = DateTime(required=True)


@ratings.event(part_of="Review")
class ReviewVotesTallied:
    """The review's vote counters were recomputed from the vote ledger."""

    __version__ = 1

    review_id = Identifier(required=True)
    upvotes = Integer(required=True)
    downvotes = Integer(required=True)
    score = Integer(required=True)
    total_votes = Integer(required=True)
    tallied_at = DateTime(required=True)
