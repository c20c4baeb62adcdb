"""
Unit tests for the reference revenue and bonus strategies.
"""

from decimal import Decimal

import pytest

from app.models import Product, PurchaseItem, SellerAccumulator
from app.strategies import calculate_bonus_by_profit, calculate_simple_revenue


def stats(profit):
    return SellerAccumulator(seller_id="S-1", name="Test Seller", profit=Decimal(profit))


PRODUCT = Product(sku="A", purchase_price=Decimal("60"))


class TestSimpleRevenue:
    def test_discounted_revenue(self):
        item = PurchaseItem(sku="A", quantity=2, discount=Decimal("10"), sale_price=Decimal("100"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("180")

    def test_no_discount(self):
        item = PurchaseItem(sku="A", quantity=3, sale_price=Decimal("19.99"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("59.97")

    def test_ignores_purchase_price(self):
        item = PurchaseItem(sku="A", quantity=1, discount=Decimal("50"), sale_price=Decimal("10"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("5")


class TestBonusByProfit:
    @pytest.mark.parametrize("index, expected", [
        (0, Decimal("150")),
        (1, Decimal("100")),
        (2, Decimal("100")),
        (3, Decimal("50")),
        (8, Decimal("50")),
        (9, Decimal("0")),
    ])
    def test_tiers_for_ten_sellers(self, index, expected):
        assert calculate_bonus_by_profit(index, 10, stats(1000)) == expected

    def test_single_seller_gets_first_place_bonus(self):
        assert calculate_bonus_by_profit(0, 1, stats(40)) == Decimal("6")

    def test_third_of_three_gets_runner_up_bonus(self):
        assert calculate_bonus_by_profit(2, 3, stats(100)) == Decimal("10")

    def test_fourth_of_four_gets_nothing(self):
        assert calculate_bonus_by_profit(3, 4, stats(100)) == Decimal("0")

    def test_negative_profit_gives_negative_bonus(self):
        assert calculate_bonus_by_profit(0, 5, stats(-100)) == Decimal("-15")
