"""Review browsing load test scenarios.

A SequentialTaskSet journey that reads the reviews of one attraction and
then flags a review and one of its images as helpful, plus a read-only user
that only browses.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.helpers.state import BrowseState
from reviews.seeding.data_generators import ATTRACTION_IDS, pick_biased


def _pick_attraction():
    """Pick an attraction, favouring a shuffled "popular" head of the list."""
    candidates = list(ATTRACTION_IDS)
    random.shuffle(candidates)
    return pick_biased(candidates)


class ReviewHelpfulJourney(SequentialTaskSet):
    """List reviews -> Mark review helpful -> Mark image helpful.

    Generates up to 2 events: ReviewMarkedHelpful, ImageMarkedHelpful.
    Flags already set produce no events but still answer 200.
    """

    def on_start(self):
        self.state = BrowseState(attraction_id=_pick_attraction())

    @task
    def list_reviews(self):
        with self.client.get(
            f"/{self.state.attraction_id}/api/reviews",
            catch_response=True,
            name="GET /{attraction_id}/api/reviews",
        ) as resp:
            if resp.status_code == 200:
                self.state.remember(resp.json())
            else:
                resp.failure(f"List reviews failed: {resp.status_code}")
                self.interrupt()

    @task
    def mark_review_helpful(self):
        if not self.state.review_ids:
            self.interrupt()
            return

        review_id = random.choice(self.state.review_ids)
        with self.client.patch(
            f"/{self.state.attraction_id}/api/reviews/{review_id}",
            catch_response=True,
            name="PATCH /{attraction_id}/api/reviews/{review_id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.flagged_reviews += 1
            else:
                resp.failure(f"Mark review helpful failed: {resp.status_code}")

    @task
    def mark_image_helpful(self):
        if not self.state.image_owners:
            self.interrupt()
            return

        image_id, review_id = random.choice(list(self.state.image_owners.items()))
        with self.client.patch(
            f"/{self.state.attraction_id}/api/reviews/{review_id}/{image_id}",
            catch_response=True,
            name="PATCH /{attraction_id}/api/reviews/{review_id}/{image_id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.flagged_images += 1
            else:
                resp.failure(f"Mark image helpful failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ReviewHelpfulUser(HttpUser):
    """Reader who browses an attraction and flags what they found useful."""

    tasks = [ReviewHelpfulJourney]
    wait_time = between(1, 3)


class ReviewBrowserUser(HttpUser):
    """Read-only traffic across popular and long-tail attractions."""

    wait_time = between(0.5, 2)

    @task
    def browse(self):
        attraction_id = _pick_attraction()
        with self.client.get(
            f"/{attraction_id}/api/reviews",
            catch_response=True,
            name="GET /{attraction_id}/api/reviews",
        ) as resp:
            # Unseeded attractions legitimately answer 404
            if resp.status_code in (200, 404):
                resp.success()
            else:
                resp.failure(f"Browse failed: {resp.status_code}")
