"""Repository for the Review aggregate."""

from ratings.domain import ratings
from ratings.review.review import Review


@ratings.repository(part_of=Review)
class ReviewRepository:
    """Review lookups used by the rating commands and the read endpoints."""

    def find_for(self, media_id, user_id) -> Review | None:
        """The review ``user_id`` wrote for ``media_id``, if any."""
        results = self._dao.query.filter(media_id=str(media_id), user_id=str(user_id)).all()
        return results.items[0] if results.items else None

    def for_media(self, media_id, offset: int = 0, limit: int = 50) -> list[Review]:
        """Reviews of one title, oldest first."""
        return (
            self._dao.query.filter(media_id=str(media_id))
            .order_by("created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )

    def by_user(self, user_id, offset: int = 0, limit: int = 50) -> list[Review]:
        """Reviews written by one user, newest first."""
        return (
            self._dao.query.filter(user_id=str(user_id))
            .order_by("-created_at")
            .offset(offset)
            .limit(limit)
            .all()
            .items
        )
