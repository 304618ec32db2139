"""Review aggregate: a traveler's review of an attraction.

Reviews are written once by the seeding pipeline and are read-mostly after
that. The only change a reader can make is flagging the review, or one of its
uploaded images, as helpful. Both flags only ever move from False to True, so
flagging is idempotent.

Structure:
    Review (aggregate root, grouped by ``attraction_id``)
    ├── user: Traveler (value object, the reviewer's public profile)
    └── upload_images: [ReviewImage] (entities, ordered as uploaded)
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, HasMany, Integer, String, Text, ValueObject

from reviews.domain import reviews
from reviews.review.events import ImageMarkedHelpful, ReviewMarkedHelpful, ReviewSeeded


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class TravelType(Enum):
    FAMILIES = "Families"
    COUPLES = "Couples"
    SOLO = "Solo"
    BUSINESS = "Business"
    FRIENDS = "Friends"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class Traveler:
    """Public profile of the person who wrote the review."""

    origin_country = String(max_length=100)
    origin_region = String(max_length=100)
    contributions = Integer(default=0)
    name = String(required=True, max_length=100)
    profile_image = String(max_length=500)

    @invariant.post
    def contributions_cannot_be_negative(self):
        if self.contributions is not None and self.contributions < 0:
            raise ValidationError({"contributions": ["Contributions cannot be negative"]})


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@reviews.entity(part_of="Review")
class ReviewImage:
    """A photo uploaded with a review.

    ``review_title`` and ``review_rating`` repeat the parent review's values
    so an image can be shown on its own in a gallery.
    """

    url = String(required=True, max_length=500)
    username = String(max_length=100)
    created_at = DateTime()
    review_title = String(max_length=200)
    review_rating = Integer()
    helpful = Boolean(default=False)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A traveler's review of an attraction, with optional uploaded images."""

    # Parent attraction (plain indexed value, not a reference)
    attraction_id = String(required=True, max_length=50)
    attraction_name = String(max_length=255)

    # Content
    rating = Integer(required=True)
    travel_type = String(choices=TravelType)
    lang = String(max_length=10, default="en")
    title = String(required=True, max_length=200)
    body = Text(required=True)

    # Dates
    exp_date = DateTime()
    created_at = DateTime()

    # Engagement
    votes = Integer(default=0)
    helpful = Boolean(default=False)

    # Author and media
    user = ValueObject(Traveler, required=True)
    upload_images = HasMany(ReviewImage)

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and (self.rating < 1 or self.rating > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    @invariant.post
    def votes_cannot_be_negative(self):
        if self.votes is not None and self.votes < 0:
            raise ValidationError({"votes": ["Votes cannot be negative"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def seed(
        cls,
        attraction_id,
        rating,
        title,
        body,
        user,
        attraction_name=None,
        travel_type=None,
        lang="en",
        exp_date=None,
        created_at=None,
        votes=0,
        helpful=False,
        upload_images=None,
    ):
        """Build a review from a seed payload (see ``reviews.seeding.data_generators``)."""
        now = datetime.now(UTC)

        review = cls(
            attraction_id=attraction_id,
            attraction_name=attraction_name,
            rating=rating,
            travel_type=travel_type,
            lang=lang,
            title=title,
            body=body,
            exp_date=exp_date,
            created_at=created_at or now,
            votes=votes,
            helpful=helpful,
            user=Traveler(**user),
        )

        for img in upload_images or []:
            fields = {
                "url": img["url"],
                "username": img.get("username", user.get("name")),
                "created_at": img.get("created_at"),
                "review_title": img.get("review_title", title),
                "review_rating": img.get("review_rating", rating),
                "helpful": img.get("helpful", False),
            }
            if img.get("id"):
                fields["id"] = img["id"]
            review.add_upload_images(ReviewImage(**fields))

        review.raise_(
            ReviewSeeded(
                review_id=str(review.id),
                attraction_id=attraction_id,
                rating=rating,
                image_ids=json.dumps(review.image_ids),
                seeded_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def image_ids(self):
        return [str(image.id) for image in self.upload_images]

    def find_image(self, image_id):
        return next((i for i in self.upload_images if str(i.id) == str(image_id)), None)

    # -------------------------------------------------------------------
    # Helpful flags
    # -------------------------------------------------------------------
    def mark_helpful(self):
        """Flag the review as helpful. No-op if it already is."""
        if self.helpful:
            return

        self.helpful = True

        self.raise_(
            ReviewMarkedHelpful(
                review_id=str(self.id),
                attraction_id=self.attraction_id,
                marked_at=datetime.now(UTC),
            )
        )

    def mark_image_helpful(self, image_id):
        """Flag one uploaded image as helpful, leaving its siblings untouched."""
        image = self.find_image(image_id)
        if image is None:
            raise ObjectNotFoundError({"upload_images": [f"Image {image_id} not found on review {self.id}"]})

        if image.helpful:
            return image

        image.helpful = True

        self.raise_(
            ImageMarkedHelpful(
                review_id=str(self.id),
                image_id=str(image.id),
                marked_at=datetime.now(UTC),
            )
        )
        return image
