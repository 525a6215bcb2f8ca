import jwt
import pytest
from protean import current_domain
from ratings.identity import Caller, TokenSettings, reset_token_settings, set_token_settings
from ratings.review.submission import SubmitRating

TEST_SECRET = "ratings-test-secret"


@pytest.fixture(autouse=True)
def token_settings():
    settings = TokenSettings(secret=TEST_SECRET)
    set_token_settings(settings)
    yield settings
    reset_token_settings()


@pytest.fixture()
def make_token():
    def _make_token(user_id, is_admin=False, secret=TEST_SECRET, **claims):
        payload = {"id": user_id, "isAdmin": is_admin, **claims}
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture()
def auth_header(make_token):
    def _auth_header(user_id, is_admin=False):
        return {"Authorization": f"Bearer {make_token(user_id, is_admin=is_admin)}"}

    return _auth_header


@pytest.fixture()
def submit_review():
    def _submit_review(media_id="media-001", user_id="author-001", rating=7, comment="Solid pacing, great cast."):
        result = current_domain.process(
            SubmitRating(media_id=media_id, user_id=user_id, rating=rating, comment=comment),
            asynchronous=False,
        )
        return result["review_id"]

    return _submit_review


@pytest.fixture()
def review_id(submit_review):
    return submit_review()


@pytest.fixture()
def u1():
    return Caller(id="user-1")


@pytest.fixture()
def u2():
    return Caller(id="user-2")


@pytest.fixture()
def u3():
    return Caller(id="user-3")
