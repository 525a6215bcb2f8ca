"""Shared BDD fixtures and step definitions for voting on reviews."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from ratings.identity import Caller
from ratings.review.review import Review
from ratings.review.submission import SubmitRating
from ratings.vote.service import cast_vote, user_vote
from ratings.vote.vote import ReviewVote


@pytest.fixture()
def error():
    """Container for captured rejections."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a review of media "{media_id}" by "{user_id}"'),
    target_fixture="review_id",
)
def review_of_media(media_id, user_id):
    result = current_domain.process(
        SubmitRating(media_id=media_id, user_id=user_id, rating=7, comment="Worth a watch."),
        asynchronous=False,
    )
    return result["review_id"]


@given(parsers.cfparse('"{user_id}" has voted {value:d}'))
def user_has_voted(review_id, user_id, value):
    cast_vote(review_id, Caller(id=user_id), value)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the review has {upvotes:d} upvotes and {downvotes:d} downvotes"))
def review_has_counts(review_id, upvotes, downvotes):
    review = current_domain.repository_for(Review).get(review_id)
    assert review.upvotes == upvotes
    assert review.downvotes == downvotes


@then(parsers.cfparse("the review score is {score:d}"))
def review_score_is(review_id, score):
    assert current_domain.repository_for(Review).get(review_id).score == score


@then(parsers.cfparse("the review has {total:d} votes in total"))
def review_total_is(review_id, total):
    assert current_domain.repository_for(Review).get(review_id).total_votes == total


@then(parsers.cfparse('"{user_id}" has a vote of {value:d}'))
def user_vote_is(review_id, user_id, value):
    assert user_vote(review_id, Caller(id=user_id)) == value


@then("no votes remain for the review")
def no_votes_remain(review_id):
    assert current_domain.repository_for(ReviewVote).find_all(review_id) == []
