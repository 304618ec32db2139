"""Tests for flagging a review and its images as helpful."""

import pytest
from protean.exceptions import ObjectNotFoundError
from reviews.review.review import Review


def _make_review(images=None):
    return Review.seed(
        attraction_id="007",
        rating=4,
        title="Lovely gardens",
        body="Plenty of shade and benches, the rose section was in full bloom.",
        user={"name": "Sam Lee", "contributions": 3},
        upload_images=images,
    )


def _three_images():
    return [{"id": f"img-{n}", "url": f"https://cdn.example.com/{n}.jpg"} for n in range(3)]


class TestMarkReviewHelpful:
    def test_sets_flag(self):
        review = _make_review()
        review.mark_helpful()
        assert review.helpful is True

    def test_is_idempotent(self):
        review = _make_review()
        review.mark_helpful()
        review.mark_helpful()
        assert review.helpful is True

    def test_leaves_images_untouched(self):
        review = _make_review(_three_images())
        review.mark_helpful()
        assert all(image.helpful is False for image in review.upload_images)


class TestMarkImageHelpful:
    def test_sets_only_target_image(self):
        review = _make_review(_three_images())
        review.mark_image_helpful("img-1")
        flags = [image.helpful for image in review.upload_images]
        assert flags == [False, True, False]

    def test_leaves_review_flag_untouched(self):
        review = _make_review(_three_images())
        review.mark_image_helpful("img-0")
        assert review.helpful is False

    def test_returns_image(self):
        review = _make_review(_three_images())
        image = review.mark_image_helpful("img-2")
        assert str(image.id) == "img-2"

    def test_is_idempotent(self):
        review = _make_review(_three_images())
        review.mark_image_helpful("img-1")
        review.mark_image_helpful("img-1")
        assert review.find_image("img-1").helpful is True

    def test_unknown_image_raises(self):
        review = _make_review(_three_images())
        with pytest.raises(ObjectNotFoundError):
            review.mark_image_helpful("img-9")
