from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from retail_lite.config import Settings
from retail_lite.models import Customer, Product

CENTS = Decimal("0.01")


class DiscountRule(ABC):
    # Each rule gets the price produced by the previous rule and returns a new one.
    # Rules hold only their configuration, so one instance can be shared between threads.

    @abstractmethod
    def apply(self, customer: Customer, product: Product, price: Decimal) -> Decimal: ...


class CategoryDiscountRule(DiscountRule):
    # e.g. category="Shoes", rate=0.80 -> 20% off shoes

    def __init__(self, category: str = "Shoes", rate: Decimal = Decimal("0.80")):
        self.category = category
        self.rate = rate

    def apply(self, customer, product, price):
        if product.category is not None and product.category.casefold() == self.category.casefold():
            return price * self.rate
        return price


class VipDiscountRule(DiscountRule):
    def __init__(self, rate: Decimal = Decimal("0.90")):
        self.rate = rate

    def apply(self, customer, product, price):
        if customer.is_vip:
            return price * self.rate
        return price


class DiscountPipeline:
    # Rules run in the order they were added; discounts compound
    # (0.80 then 0.90 gives 0.72, not 0.70). Only the final price is rounded.

    def __init__(self, rules: Optional[Iterable[DiscountRule]] = None):
        self.rules: List[DiscountRule] = list(rules or [])

    def add_rule(self, rule: DiscountRule) -> None:
        self.rules.append(rule)

    def price_for(self, customer: Customer, product: Product, base_price: Optional[Decimal] = None) -> Decimal:
        price = product.price if base_price is None else base_price

        for rule in self.rules:
            price = rule.apply(customer, product, price)

        return price.quantize(CENTS, rounding=ROUND_HALF_UP)


def default_pipeline(settings: Optional[Settings] = None) -> DiscountPipeline:
    """Category discount first, then VIP discount."""
    if settings is None:
        return DiscountPipeline([CategoryDiscountRule(), VipDiscountRule()])
    return DiscountPipeline(
        [
            CategoryDiscountRule(settings.discount_category, settings.category_rate),
            VipDiscountRule(settings.vip_rate),
        ]
    )
