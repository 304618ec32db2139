"""Review service: the three operations behind the HTTP surface.

Every operation returns an ``Outcome`` so the transport layer only has to
copy ``status`` and ``data`` onto a response. A missing review or image is an
expected result (404), not an exception. Any other failure raised by the
store propagates to the caller unmodified.
"""

from dataclasses import dataclass
from typing import Any

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from reviews.review.helpfulness import MarkImageHelpful, MarkReviewHelpful
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND = "not found"


@dataclass(frozen=True)
class Outcome:
    """Result of a service operation: either ``data`` or an ``error`` reason."""

    status: int
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> "Outcome":
        return cls(status=200, data=data)

    @classmethod
    def not_found(cls) -> "Outcome":
        return cls(status=404, error=NOT_FOUND)


def find_for_id(attraction_id: str) -> Outcome:
    """All reviews of an attraction, or not-found when it has none."""
    found = current_domain.repository_for(Review).find_by_attraction(attraction_id)
    if not found:
        logger.info("No reviews for attraction", attraction_id=attraction_id)
        return Outcome.not_found()
    return Outcome.success(found)


def update_review(review_id: str) -> Outcome:
    """Flag a review as helpful."""
    try:
        current_domain.process(MarkReviewHelpful(review_id=review_id), asynchronous=False)
    except ObjectNotFoundError:
        logger.info("Review not found", review_id=review_id)
        return Outcome.not_found()
    return Outcome.success()


def update_image(image_id: str, review_id: str | None = None) -> Outcome:
    """Flag an uploaded image as helpful. ``review_id`` does not take part in the lookup."""
    try:
        current_domain.process(
            MarkImageHelpful(image_id=image_id, review_id=review_id),
            asynchronous=False,
        )
    except ObjectNotFoundError:
        logger.info("Image not found", image_id=image_id)
        return Outcome.not_found()
    return Outcome.success()
