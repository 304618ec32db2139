"""Attraction Reviews bounded context: reviews, helpful flags and seeding.

Serves customer reviews of attractions grouped by attraction id, lets readers
flag a review or one of its uploaded images as helpful, and seeds the store
with synthetic reviews for development and testing.
"""

import structlog
from protean.domain import Domain

reviews = Domain(name="reviews")

logger = structlog.get_logger(__name__)
