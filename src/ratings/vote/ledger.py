"""VoteLedger — persistence boundary for ReviewVote records.

Point lookups go through the ballot key, range lookups through the indexed
``review_id``. No voting rules live here.
"""

from protean.exceptions import ObjectNotFoundError

from ratings.domain import ratings
from ratings.vote.vote import NO_VOTE, ReviewVote, ballot_id_for

_PAGE_SIZE = 500


@ratings.repository(part_of=ReviewVote)
class VoteLedger:
    def find_one(self, review_id, user_id) -> ReviewVote | None:
        try:
            return self.get(ballot_id_for(review_id, user_id))
        except ObjectNotFoundError:
            return None

    def find_all(self, review_id) -> list[ReviewVote]:
        """Every vote cast on ``review_id``, read page by page."""
        votes: list[ReviewVote] = []
        offset = 0
        while True:
            page = (
                self._dao.query.filter(review_id=str(review_id))
                .order_by("ballot_id")
                .offset(offset)
                .limit(_PAGE_SIZE)
                .all()
            )
            votes.extend(page.items)
            offset += len(page.items)
            if not page.items or offset >= page.total:
                return votes

    def insert(self, review_id, user_id, value) -> ReviewVote:
        vote = ReviewVote.cast(review_id=review_id, user_id=user_id, value=value)
        self.add(vote)
        return vote

    def update_value(self, vote: ReviewVote, value) -> ReviewVote:
        vote.change_to(value)
        self.add(vote)
        return vote

    def delete(self, vote: ReviewVote) -> None:
        self._dao.delete(vote)

    def value_for(self, review_id, user_id) -> int:
        """The user's current vote on the review, or 0 when there is none."""
        vote = self.find_one(review_id, user_id)
        return vote.value if vote else NO_VOTE

    def purge(self, review_id) -> int:
        """Delete every vote on ``review_id`` and return how many were removed."""
        votes = self.find_all(review_id)
        for vote in votes:
            self._dao.delete(vote)
        return len(votes)
