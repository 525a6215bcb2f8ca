"""Error taxonomy for the Ratings domain.

Validation and not-found failures extend Protean's own exceptions so the
framework's FastAPI handlers recognise them; the rest are plain service
errors translated to HTTP responses by ``ratings.api.errors``.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class RatingsError(Exception):
    """Base class for service-level failures that are not validation errors."""


class Unauthorized(RatingsError):
    """No resolvable caller identity was presented."""

    def __init__(self, message: str = "Authentication required"):
        self.message = message
        super().__init__(message)


class NotReviewOwner(RatingsError):
    """The caller tried to change a review that belongs to someone else."""

    def __init__(self, review_id, user_id):
        self.review_id = review_id
        self.user_id = user_id
        super().__init__(f"User {user_id} does not own review {review_id}")


class StorageFailure(RatingsError):
    """A persistence operation failed. The cause is chained, never exposed."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}")


class InvalidVoteValue(ValidationError):
    def __init__(self, value):
        self.value = value
        super().__init__({"value": [f"Vote value must be 1 or -1, got {value!r}"]})


class ReviewNotFound(ObjectNotFoundError):
    def __init__(self, review_id):
        self.review_id = review_id
        super().__init__({"review": [f"Review {review_id} does not exist"]})
