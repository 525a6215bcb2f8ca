"""BDD tests for voting on reviews."""

from pytest_bdd import parsers, scenarios, then, when
from ratings.exceptions import InvalidVoteValue, Unauthorized
from ratings.identity import Caller
from ratings.review.service import delete_review
from ratings.vote.service import cast_vote

scenarios("features/vote_toggling.feature")


@when(parsers.cfparse('"{user_id}" votes {value:d} on the review'))
def user_votes(review_id, user_id, value, error):
    try:
        cast_vote(review_id, Caller(id=user_id), value)
    except (InvalidVoteValue, Unauthorized) as exc:
        error["exc"] = exc


@when(parsers.cfparse("an anonymous reader votes {value:d} on the review"))
def anonymous_votes(review_id, value, error):
    try:
        cast_vote(review_id, None, value)
    except Unauthorized as exc:
        error["exc"] = exc


@when(parsers.cfparse('"{user_id}" deletes the review'))
def user_deletes(review_id, user_id):
    delete_review(review_id, Caller(id=user_id))


@then("the vote is refused as invalid")
def refused_as_invalid(error):
    assert isinstance(error["exc"], InvalidVoteValue)


@then("the vote is refused as unauthorized")
def refused_as_unauthorized(error):
    assert isinstance(error["exc"], Unauthorized)
