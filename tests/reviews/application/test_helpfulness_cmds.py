"""Application tests for the MarkReviewHelpful and MarkImageHelpful command handlers."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from reviews.review.helpfulness import MarkImageHelpful, MarkReviewHelpful
from reviews.review.review import Review
from reviews.seeding.loader import load_reviews


def _seed_review(images=None, **overrides):
    payload = {
        "attraction_id": "031",
        "rating": 5,
        "title": "Best market in town",
        "body": "Great street food stalls and friendly vendors all around.",
        "user": {"name": "Luis M", "contributions": 9},
        "upload_images": images,
    }
    payload.update(overrides)
    return load_reviews([payload])[0]


def _images(*ids):
    return [{"id": image_id, "url": f"https://cdn.example.com/{image_id}.jpg"} for image_id in ids]


class TestMarkReviewHelpfulCommand:
    def test_flag_persists(self):
        review_id = _seed_review()
        current_domain.process(MarkReviewHelpful(review_id=review_id), asynchronous=False)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.helpful is True

    def test_returns_review_id(self):
        review_id = _seed_review()
        result = current_domain.process(MarkReviewHelpful(review_id=review_id), asynchronous=False)
        assert result == review_id

    def test_repeat_is_idempotent(self):
        review_id = _seed_review()
        for _ in range(2):
            current_domain.process(MarkReviewHelpful(review_id=review_id), asynchronous=False)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.helpful is True

    def test_unknown_review_raises(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(MarkReviewHelpful(review_id="0"), asynchronous=False)


class TestMarkImageHelpfulCommand:
    def test_flag_persists_on_target_only(self):
        review_id = _seed_review(images=_images("cmd-img-1", "cmd-img-2"))
        current_domain.process(MarkImageHelpful(image_id="cmd-img-2"), asynchronous=False)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.find_image("cmd-img-1").helpful is False
        assert review.find_image("cmd-img-2").helpful is True
        assert review.helpful is False

    def test_mismatched_review_id_still_flags_image(self):
        review_id = _seed_review(images=_images("cmd-img-3"))
        current_domain.process(
            MarkImageHelpful(image_id="cmd-img-3", review_id="some-other-review"),
            asynchronous=False,
        )
        review = current_domain.repository_for(Review).get(review_id)
        assert review.find_image("cmd-img-3").helpful is True

    def test_repeat_is_idempotent(self):
        review_id = _seed_review(images=_images("cmd-img-4"))
        for _ in range(2):
            current_domain.process(MarkImageHelpful(image_id="cmd-img-4"), asynchronous=False)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.find_image("cmd-img-4").helpful is True

    def test_unknown_image_raises(self):
        _seed_review(images=_images("cmd-img-5"))
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(MarkImageHelpful(image_id="0"), asynchronous=False)
