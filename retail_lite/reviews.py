from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

from retail_lite.models import Review


class ReviewRegistry:
    def __init__(self) -> None:
        self.reviews: Dict[int, List[Review]] = {}

    def add_review(self, review: Review) -> None:
        self.reviews.setdefault(review.product.id, []).append(review)

    def get_reviews_for_product(self, product_id: int) -> List[Review]:
        return list(self.reviews.get(product_id, []))

    def average_rating(self, product_id: int) -> Optional[Decimal]:
        reviews = self.reviews.get(product_id)
        if not reviews:
            return None
        return Decimal(sum(r.rating for r in reviews)) / len(reviews)

    def format_reviews_for_product(self, product_id: int) -> List[str]:
        return [str(r) for r in self.get_reviews_for_product(product_id)]
