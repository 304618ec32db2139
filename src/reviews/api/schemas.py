"""Pydantic response schemas for the Reviews API.

The wire format keeps the camelCase keys the review widget reads
(``attractionId``, ``uploadImages``, ...), generated from the snake_case field
names by the alias generator.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class TravelerSchema(BaseModel):
    model_config = _CAMEL

    origin_country: str | None = None
    origin_region: str | None = None
    contributions: int = 0
    name: str
    profile_image: str | None = None


class ReviewImageSchema(BaseModel):
    model_config = _CAMEL

    id: str
    url: str
    username: str | None = None
    created_at: datetime | None = None
    review_title: str | None = None
    review_rating: int | None = None
    helpful: bool = False


class ReviewSchema(BaseModel):
    model_config = _CAMEL

    id: str
    attraction_id: str
    attraction_name: str | None = None
    rating: int
    travel_type: str | None = None
    lang: str | None = None
    title: str
    body: str
    exp_date: datetime | None = None
    created_at: datetime | None = None
    votes: int = 0
    helpful: bool = False
    user: TravelerSchema
    upload_images: list[ReviewImageSchema] = []

    @classmethod
    def from_review(cls, review) -> ReviewSchema:
        user = review.user
        return cls(
            id=str(review.id),
            attraction_id=review.attraction_id,
            attraction_name=review.attraction_name,
            rating=review.rating,
            travel_type=review.travel_type,
            lang=review.lang,
            title=review.title,
            body=review.body,
            exp_date=review.exp_date,
            created_at=review.created_at,
            votes=review.votes or 0,
            helpful=bool(review.helpful),
            user=TravelerSchema(
                origin_country=user.origin_country,
                origin_region=user.origin_region,
                contributions=user.contributions or 0,
                name=user.name,
                profile_image=user.profile_image,
            ),
            upload_images=[
                ReviewImageSchema(
                    id=str(image.id),
                    url=image.url,
                    username=image.username,
                    created_at=image.created_at,
                    review_title=image.review_title,
                    review_rating=image.review_rating,
                    helpful=bool(image.helpful),
                )
                for image in review.upload_images
            ],
        )


class StatusResponse(BaseModel):
    status: str = "ok"
