"""
Reference revenue and bonus strategies.

Both are plain functions handed to ``analyze_sales_data`` through its options;
callers are free to supply their own with the same signatures.
"""

from decimal import Decimal

from app.models import Product, PurchaseItem, SellerAccumulator

_HUNDRED = Decimal("100")

# bonus share of profit by rank
_FIRST_PLACE_RATE = Decimal("0.15")
_RUNNER_UP_RATE   = Decimal("0.10")
_DEFAULT_RATE     = Decimal("0.05")


def calculate_simple_revenue(item: PurchaseItem, _product: Product) -> Decimal:
    """List-price revenue for one line item, net of its percentage discount."""
    return item.sale_price * item.quantity * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> Decimal:
    # First match wins: with one or two sellers the top-rank rules
    # take precedence over the last-place rule.
    profit = seller.profit
    if index == 0:
        return profit * _FIRST_PLACE_RATE
    elif index in (1, 2):
        return profit * _RUNNER_UP_RATE
    elif index == total - 1:
        return Decimal("0")
    else:
        return profit * _DEFAULT_RATE
