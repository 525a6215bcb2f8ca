"""Tests for the ReviewVote aggregate and vote value checking."""

from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from ratings.exceptions import InvalidVoteValue
from ratings.vote.vote import ReviewVote, VoteValue, ballot_id_for, vote_value


class TestVoteValue:
    @pytest.mark.parametrize("raw,expected", [(1, 1), (-1, -1), (1.0, 1), (-1.0, -1)])
    def test_unit_values_accepted(self, raw, expected):
        assert vote_value(raw) == expected

    @pytest.mark.parametrize("raw", [0, 2, -2, 0.5, -1.5, 100, float("nan")])
    def test_other_numbers_rejected(self, raw):
        with pytest.raises(InvalidVoteValue):
            vote_value(raw)

    @pytest.mark.parametrize("raw", [True, False, "1", None, Decimal("1"), [1]])
    def test_non_numbers_rejected(self, raw):
        with pytest.raises(InvalidVoteValue):
            vote_value(raw)

    def test_invalid_vote_value_is_a_validation_error(self):
        with pytest.raises(ValidationError) as exc:
            vote_value(3)
        assert "Vote value must be 1 or -1" in str(exc.value)


class TestCast:
    def test_ballot_keyed_by_review_and_user(self):
        vote = ReviewVote.cast(review_id="rev-1", user_id="user-1", value=1)
        assert vote.ballot_id == ballot_id_for("rev-1", "user-1")
        assert vote.value == VoteValue.UP.value

    def test_distinct_pairs_have_distinct_ballots(self):
        assert ballot_id_for("rev-1", "user-1") != ballot_id_for("rev-1", "user-2")
        assert ballot_id_for("rev-1", "user-1") != ballot_id_for("rev-2", "user-1")

    def test_cast_rejects_zero(self):
        with pytest.raises(InvalidVoteValue):
            ReviewVote.cast(review_id="rev-1", user_id="user-1", value=0)

    def test_timestamps_set(self):
        vote = ReviewVote.cast(review_id="rev-1", user_id="user-1", value=-1)
        assert vote.created_at is not None
        assert vote.updated_at == vote.created_at


class TestChangeTo:
    def test_flip_keeps_identity(self):
        vote = ReviewVote.cast(review_id="rev-1", user_id="user-1", value=1)
        ballot = vote.ballot_id
        vote.change_to(-1)
        assert vote.ballot_id == ballot
        assert vote.value == VoteValue.DOWN.value

    def test_change_to_invalid_value_rejected(self):
        vote = ReviewVote.cast(review_id="rev-1", user_id="user-1", value=1)
        with pytest.raises(InvalidVoteValue):
            vote.change_to(0.5)
        assert vote.value == 1

    def test_direct_assignment_guarded_by_invariant(self):
        vote = ReviewVote.cast(review_id="rev-1", user_id="user-1", value=1)
        with pytest.raises(ValidationError):
            vote.value = 5
