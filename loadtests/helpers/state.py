"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, with no cross-user sharing.
State keeps the ids returned by the listing endpoint so the follow-up
PATCH requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class BrowseState:
    """Tracks one reader's visit to an attraction's reviews."""

    attraction_id: str
    review_ids: list[str] = field(default_factory=list)
    image_owners: dict[str, str] = field(default_factory=dict)
    flagged_reviews: int = 0
    flagged_images: int = 0

    def remember(self, reviews: list[dict]) -> None:
        """Record review and image ids from a ``GET .../api/reviews`` body."""
        for review in reviews:
            self.review_ids.append(review["id"])
            for image in review.get("uploadImages", []):
                self.image_owners[image["id"]] = review["id"]
