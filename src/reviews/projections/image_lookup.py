"""ImageLookup: index from an uploaded image id to the review that holds it.

Images live inside their review, so finding "the review that has image X"
would otherwise mean scanning every review. The projector writes one row per
image when a review is seeded; purging an attraction deletes the rows.
"""

import json

from protean.core.projector import on
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.events import ReviewSeeded
from reviews.review.review import Review


@reviews.projection
class ImageLookup:
    image_id = Identifier(identifier=True, required=True)
    review_id = Identifier(required=True)
    attraction_id = String(required=True)


@reviews.projector(projector_for=ImageLookup, aggregates=[Review])
class ImageLookupProjector:
    @on(ReviewSeeded)
    def on_review_seeded(self, event):
        repo = current_domain.repository_for(ImageLookup)
        for image_id in json.loads(event.image_ids or "[]"):
            repo.add(
                ImageLookup(
                    image_id=image_id,
                    review_id=event.review_id,
                    attraction_id=event.attraction_id,
                )
            )
