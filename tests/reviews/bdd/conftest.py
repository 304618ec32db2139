"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from pytest_bdd import given, parsers, then
from reviews.review.events import ImageMarkedHelpful, ReviewMarkedHelpful, ReviewSeeded
from reviews.review.review import Review

_REVIEW_EVENT_CLASSES = {
    "ReviewSeeded": ReviewSeeded,
    "ReviewMarkedHelpful": ReviewMarkedHelpful,
    "ImageMarkedHelpful": ImageMarkedHelpful,
}


@pytest.fixture()
def error():
    """Container for captured lookup errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("a seeded review with {count:d} images"), target_fixture="review")
def seeded_review(count):
    review = Review.seed(
        attraction_id="bdd-001",
        rating=4,
        title="BDD Test Review",
        body="This is a BDD test review body about a day at the attraction.",
        user={"name": "BDD Reader", "contributions": 1},
        upload_images=[{"id": f"bdd-img-{n}", "url": f"https://cdn.example.com/bdd-{n}.jpg"} for n in range(1, count + 1)],
    )
    review._events.clear()
    return review


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the review is helpful")
def review_is_helpful(review):
    assert review.helpful is True


@then("the review is not helpful")
def review_is_not_helpful(review):
    assert review.helpful is False


@then("no image is helpful")
def no_image_is_helpful(review):
    assert all(image.helpful is False for image in review.upload_images)


@then(parsers.cfparse('a "{event_type}" event is raised'))
def event_raised(review, event_type):
    event_cls = _REVIEW_EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in review._events)


@then("no event is raised")
def no_event_raised(review):
    assert review._events == []
