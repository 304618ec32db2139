"""Domain events for the Review aggregate.

Events are immutable facts recorded when a review enters the store or when a
reader flags content as helpful. The image lookup projection is maintained
from ``ReviewSeeded``.
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSeeded:
    """A review was written into the store by the seeding pipeline."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    attraction_id = String(required=True)
    rating = Integer(required=True)
    image_ids = Text()  # JSON array of image ids, in upload order
    seeded_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewMarkedHelpful:
    """A reader flagged the review as helpful."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    attraction_id = String(required=True)
    marked_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ImageMarkedHelpful:
    """A reader flagged one of the review's uploaded images as helpful."""

    __version__ = "v1"

    review_id = Identifier(required=True)
    image_id = Identifier(required=True)
    marked_at = DateTime(required=True)
