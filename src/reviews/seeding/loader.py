"""Write generated review payloads into the store, and clear them again."""

from protean.utils.globals import current_domain

from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


def load_reviews(payloads) -> list[str]:
    """Persist one review per payload. Returns the new review ids in order."""
    repo = current_domain.repository_for(Review)
    review_ids = []

    for payload in payloads:
        review = Review.seed(**payload)
        repo.add(review)
        review_ids.append(str(review.id))

    logger.info("Seeded reviews", count=len(review_ids))
    return review_ids


def purge_attraction(attraction_id: str) -> int:
    """Delete every review of ``attraction_id``. Returns how many were deleted."""
    removed = current_domain.repository_for(Review).remove_for_attraction(attraction_id)
    logger.info("Purged reviews", attraction_id=attraction_id, count=removed)
    return removed
