"""Repository for the Review aggregate.

Adds the attraction and image queries the review service needs, and the
filtered delete used to clear seeded data.
"""

from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.projections.image_lookup import ImageLookup
from reviews.review.review import Review


@reviews.repository(part_of=Review)
class ReviewRepository:
    """Review persistence.

    ``get`` and ``find_by_image`` raise ``ObjectNotFoundError`` for unknown ids;
    ``find_by_attraction`` returns an empty list instead.
    """

    def find_by_attraction(self, attraction_id: str) -> list[Review]:
        """All reviews of one attraction, in store order. Not paginated."""
        return self._dao.query.filter(attraction_id=attraction_id).limit(None).all().items

    def find_by_image(self, image_id: str) -> Review:
        """The review holding the uploaded image ``image_id``."""
        lookup = current_domain.repository_for(ImageLookup).get(image_id)
        return self.get(lookup.review_id)

    def remove_for_attraction(self, attraction_id: str) -> int:
        """Delete every review of an attraction along with its images and lookup rows.

        Returns the number of reviews deleted.
        """
        lookup_repo = current_domain.repository_for(ImageLookup)
        removed = 0

        for review in self.find_by_attraction(attraction_id):
            for record in lookup_repo._dao.query.filter(review_id=str(review.id)).limit(None).all().items:
                lookup_repo._dao.delete(record)

            for image in list(review.upload_images):
                review.remove_upload_images(image)
            self.add(review)

            self._dao.delete(review)
            removed += 1

        return removed
