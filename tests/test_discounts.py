"""Tests for discount rules and their composition."""
from decimal import Decimal

from retail_lite.config import load_settings
from retail_lite.discounts import CategoryDiscountRule, DiscountPipeline, VipDiscountRule, default_pipeline
from retail_lite.models import Customer, Product


def _product(category, price="100.00"):
    return Product(1, "Item", category, Decimal(price), 10)


def test_vip_buying_shoes_gets_both_discounts(vip_customer):
    assert default_pipeline().price_for(vip_customer, _product("Shoes")) == Decimal("72.00")


def test_vip_buying_other_category_gets_vip_discount_only(vip_customer):
    assert default_pipeline().price_for(vip_customer, _product("Jackets")) == Decimal("90.00")


def test_regular_customer_buying_shoes_gets_category_discount_only(customer):
    assert default_pipeline().price_for(customer, _product("Shoes")) == Decimal("80.00")


def test_no_discount_applies(customer):
    assert default_pipeline().price_for(customer, _product(None)) == Decimal("100.00")


def test_category_match_is_case_insensitive(customer):
    rule = CategoryDiscountRule("Shoes", Decimal("0.80"))

    assert rule.apply(customer, _product("sHoEs"), Decimal("50")) == Decimal("40.00")
    assert rule.apply(customer, _product(None), Decimal("50")) == Decimal("50")


def test_each_rule_gets_previous_output(vip_customer):
    """Rules compound: 20% then 10% is 28% off, not 30%."""
    seen = []

    class Spy(VipDiscountRule):
        def apply(self, customer, product, price):
            seen.append(price)
            return super().apply(customer, product, price)

    pipeline = DiscountPipeline([CategoryDiscountRule(), Spy()])

    assert pipeline.price_for(vip_customer, _product("Shoes")) == Decimal("72.00")
    assert seen == [Decimal("80.0000")]


def test_final_price_is_rounded_to_cents(vip_customer):
    # 59.49 * 0.80 * 0.90 = 42.8328
    assert default_pipeline().price_for(vip_customer, _product("Shoes", "59.49")) == Decimal("42.83")


def test_base_price_override(customer):
    assert default_pipeline().price_for(customer, _product("Shoes"), Decimal("10.00")) == Decimal("8.00")


def test_empty_pipeline_passes_price_through(customer):
    pipeline = DiscountPipeline()

    assert pipeline.price_for(customer, _product("Shoes", "19.99")) == Decimal("19.99")

    pipeline.add_rule(CategoryDiscountRule())
    assert pipeline.price_for(customer, _product("Shoes", "19.99")) == Decimal("15.99")


def test_pipeline_from_settings(monkeypatch):
    monkeypatch.setenv("RETAIL_DISCOUNT_CATEGORY", "Jackets")
    monkeypatch.setenv("RETAIL_CATEGORY_RATE", "0.50")
    monkeypatch.setenv("RETAIL_VIP_RATE", "0.80")

    pipeline = default_pipeline(load_settings())
    vip = Customer("Carol", "carol@example.com", is_vip=True)

    assert pipeline.price_for(vip, _product("jackets")) == Decimal("40.00")
    assert pipeline.price_for(vip, _product("Shoes")) == Decimal("80.00")
