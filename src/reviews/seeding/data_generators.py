"""Faker-based generators for synthetic attraction reviews.

Payloads use the field names of ``Review.seed`` and the ``Traveler`` /
``ReviewImage`` fields, so a generated dict can be passed straight to the
factory. Categorical values (rating, travel type, language, image count) are
drawn with ``pick_biased`` so the corpus leans towards the first candidate in
each list, which is how real review sites skew: mostly 5-star, mostly English,
mostly without photos.
"""

import random
import uuid
from datetime import UTC, timedelta

from faker import Faker

from reviews.review.review import TravelType

fake = Faker()

# Attraction ids "001" .. "100", fixed for the life of the process
ATTRACTION_IDS = tuple(f"{n:03d}" for n in range(1, 101))

RATINGS = [5, 4, 3, 2, 1]
TRAVEL_TYPES = [t.value for t in TravelType]
LANGUAGES = ["en", "es", "fr", "de", "it", "ja"]
IMAGE_COUNTS = [0, 1, 2, 3, 4, 5]

REVIEW_KEYS = (
    "attraction_id",
    "attraction_name",
    "rating",
    "travel_type",
    "exp_date",
    "lang",
    "body",
    "title",
    "votes",
    "created_at",
    "helpful",
    "user",
    "upload_images",
)
USER_KEYS = ("origin_country", "origin_region", "contributions", "name", "profile_image")
IMAGE_KEYS = ("id", "helpful", "url", "username", "created_at", "review_title", "review_rating")


# ---------- Sampling primitives ----------


def generate_num_between(min_value: int, max_value: int) -> int:
    """Uniform random integer in ``[min_value, max_value]``, both ends included."""
    return random.randint(min_value, max_value)


def pick_biased(candidates):
    """Pick one candidate, favouring the first.

    The first candidate carries half of the probability mass and the rest is
    split evenly among the others. A single candidate is always returned.
    """
    if not candidates:
        raise ValueError("pick_biased needs at least one candidate")
    if len(candidates) == 1:
        return candidates[0]

    rest = 0.5 / (len(candidates) - 1)
    weights = [0.5] + [rest] * (len(candidates) - 1)
    return random.choices(candidates, weights=weights, k=1)[0]


# ---------- Payload builders ----------


def attraction_name() -> str:
    """Generate a name like 'Harbor Lighthouse Museum'."""
    kind = random.choice(["Museum", "Park", "Tower", "Gardens", "Market", "Cathedral", "Bridge", "Aquarium"])
    return f"{fake.last_name()} {fake.word().capitalize()} {kind}"[:255]


def traveler_data() -> dict:
    """Generate a ``Traveler`` payload."""
    return {
        "origin_country": fake.country()[:100],
        "origin_region": fake.city()[:100],
        "contributions": generate_num_between(1, 500),
        "name": fake.name()[:100],
        "profile_image": f"https://cdn.example.com/profiles/{uuid.uuid4().hex}.jpg",
    }


def image_data(review_title: str, review_rating: int, username: str, created_at=None) -> dict:
    """Generate a ``ReviewImage`` payload for a review with the given title and rating."""
    return {
        "id": uuid.uuid4().hex,
        "helpful": False,
        "url": f"https://cdn.example.com/reviews/{uuid.uuid4().hex}.jpg",
        "username": username,
        "created_at": created_at or fake.date_time_between(start_date="-2y", tzinfo=UTC),
        "review_title": review_title,
        "review_rating": review_rating,
    }


def review_data(attraction_id: str, name: str | None = None) -> dict:
    """Generate a ``Review.seed`` payload for one attraction."""
    user = traveler_data()
    rating = pick_biased(RATINGS)
    title = fake.sentence(nb_words=generate_num_between(3, 8))[:200]
    created_at = fake.date_time_between(start_date="-3y", tzinfo=UTC)
    exp_date = created_at - timedelta(days=generate_num_between(0, 90))

    images = [
        image_data(title, rating, user["name"], created_at=created_at) for _ in range(pick_biased(IMAGE_COUNTS))
    ]

    return {
        "attraction_id": attraction_id,
        "attraction_name": name or attraction_name(),
        "rating": rating,
        "travel_type": pick_biased(TRAVEL_TYPES),
        "exp_date": exp_date,
        "lang": pick_biased(LANGUAGES),
        "body": fake.paragraph(nb_sentences=generate_num_between(2, 8)),
        "title": title,
        "votes": generate_num_between(0, 50),
        "created_at": created_at,
        "helpful": False,
        "user": user,
        "upload_images": images,
    }


# ---------- Corpora ----------


def generate_test_data(attraction_id: str, count: int = 5) -> list[dict]:
    """Generate ``count`` reviews for a single attraction."""
    name = attraction_name()
    return [review_data(attraction_id, name=name) for _ in range(count)]


def seed_data(attraction_ids=ATTRACTION_IDS, min_per: int = 1, max_per: int = 8) -> list[dict]:
    """Generate a corpus covering every attraction in ``attraction_ids``.

    Each attraction gets between ``min_per`` and ``max_per`` reviews.
    """
    corpus = []
    for attraction_id in attraction_ids:
        corpus.extend(generate_test_data(attraction_id, count=generate_num_between(min_per, max_per)))
    return corpus
