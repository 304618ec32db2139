"""FastAPI routes for the Reviews bounded context.

Each route calls one review service operation and renders its ``Outcome``:
the outcome's status becomes the response status, and a not-found outcome is
sent with an empty body.
"""

from fastapi import APIRouter, Response

from reviews.api.schemas import ReviewSchema, StatusResponse
from reviews.review.service import find_for_id, update_image, update_review

review_router = APIRouter(tags=["reviews"])

_NOT_FOUND = {404: {"description": "No matching review or image"}}


@review_router.get("/{attraction_id}/api/reviews", response_model=list[ReviewSchema], responses=_NOT_FOUND)
async def list_reviews(attraction_id: str):
    """All reviews of an attraction."""
    outcome = find_for_id(attraction_id)
    if not outcome.ok:
        return Response(status_code=outcome.status)
    return [ReviewSchema.from_review(review) for review in outcome.data]


@review_router.patch("/{attraction_id}/api/reviews/{review_id}", response_model=StatusResponse, responses=_NOT_FOUND)
async def mark_review_helpful(attraction_id: str, review_id: str):
    """Flag a review as helpful."""
    outcome = update_review(review_id)
    if not outcome.ok:
        return Response(status_code=outcome.status)
    return StatusResponse()


@review_router.patch(
    "/{attraction_id}/api/reviews/{review_id}/{image_id}",
    response_model=StatusResponse,
    responses=_NOT_FOUND,
)
async def mark_image_helpful(attraction_id: str, review_id: str, image_id: str):
    """Flag one of a review's images as helpful. The image is located by ``image_id`` alone."""
    outcome = update_image(image_id, review_id=review_id)
    if not outcome.ok:
        return Response(status_code=outcome.status)
    return StatusResponse()
