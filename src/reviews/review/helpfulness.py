"""MarkReviewHelpful / MarkImageHelpful: flag review content as helpful.

Both commands are idempotent: flagging something that is already helpful
succeeds without raising a second event. An unknown review or image id
surfaces as ``ObjectNotFoundError`` from the repository.
"""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class MarkReviewHelpful:
    review_id = Identifier(required=True)


@reviews.command(part_of="Review")
class MarkImageHelpful:
    image_id = Identifier(required=True)
    review_id = Identifier()  # As given in the request path; the image id alone locates the review


@reviews.command_handler(part_of=Review)
class HelpfulnessHandler:
    @handle(MarkReviewHelpful)
    def mark_review_helpful(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        review.mark_helpful()

        repo.add(review)
        return str(review.id)

    @handle(MarkImageHelpful)
    def mark_image_helpful(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.find_by_image(command.image_id)

        if command.review_id and str(command.review_id) != str(review.id):
            logger.debug(
                "Image belongs to a different review than requested",
                image_id=str(command.image_id),
                requested_review_id=str(command.review_id),
                owner_review_id=str(review.id),
            )

        review.mark_image_helpful(command.image_id)

        repo.add(review)
        return str(review.id)
