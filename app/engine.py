import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from pydantic import ValidationError

from app.errors import (
    InvalidInputError,
    InvalidStrategyTypeError,
    MissingStrategyError,
    UnknownProductError,
    UnknownSellerError,
)
from app.models import (
    BonusStrategy,
    Product,
    PurchaseRecord,
    RevenueStrategy,
    SalesDataset,
    Seller,
    SellerAccumulator,
    SellerReport,
    TopProduct,
)

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10

_COLLECTIONS = ("sellers", "products", "purchase_records")
_STRATEGIES = ("calculate_revenue", "calculate_bonus")
_TWO_DP = Decimal("0.01")


def _field(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _is_collection(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _to_decimal(value: Any) -> Decimal:
    # floats go through str() to keep their printed value
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round_money(value: Decimal) -> Decimal:
    return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


# ── 1. Validation ────────────────────────────────────────────────────────────

def validate_input(data: Any, options: Any) -> SalesDataset:
    """
    Check the input bundle and the strategies before anything is aggregated.

    Returns the data coerced into a ``SalesDataset``.
    """
    if data is None:
        raise InvalidInputError("Sales data is missing")
    for name in _COLLECTIONS:
        collection = _field(data, name)
        if not _is_collection(collection) or len(collection) == 0:
            raise InvalidInputError(f"'{name}' must be a non-empty list")

    if options is None:
        raise MissingStrategyError("Analysis options are missing")
    for name in _STRATEGIES:
        if _field(options, name) is None:
            raise MissingStrategyError(f"Option '{name}' is missing")
    for name in _STRATEGIES:
        if not callable(_field(options, name)):
            raise InvalidStrategyTypeError(f"Option '{name}' is not callable")

    if isinstance(data, SalesDataset):
        return data
    try:
        return SalesDataset.model_validate(
            {name: list(_field(data, name)) for name in _COLLECTIONS}
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed sales data: {exc}") from exc


# ── 2. Indexing ──────────────────────────────────────────────────────────────

def build_seller_index(
    sellers: Sequence[Seller],
) -> tuple[list[SellerAccumulator], dict[str, SellerAccumulator]]:
    stats = [SellerAccumulator(seller_id=s.id, name=s.name) for s in sellers]
    return stats, {stat.seller_id: stat for stat in stats}


def build_product_index(products: Sequence[Product]) -> dict[str, Product]:
    return {p.sku: p for p in products}


# ── 3. Aggregation ───────────────────────────────────────────────────────────

def aggregate_purchases(
    records: Sequence[PurchaseRecord],
    seller_index: dict[str, SellerAccumulator],
    product_index: dict[str, Product],
    calculate_revenue: RevenueStrategy,
) -> None:
    for record in records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            raise UnknownSellerError(record.seller_id)
        seller.sales_count += 1
        seller.revenue += record.total_amount

        # profit is summed per line item, independently of record revenue
        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                raise UnknownProductError(item.sku)
            cost = product.purchase_price * item.quantity
            line_revenue = _to_decimal(calculate_revenue(item, product))
            seller.profit += line_revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity


# ── 4. Ranking ───────────────────────────────────────────────────────────────

def _top_products(products_sold: dict[str, int]) -> list[TopProduct]:
    # sorted() is stable, so equal quantities keep first-sale order
    ranked = sorted(products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:TOP_PRODUCTS_LIMIT]]


def rank_sellers(
    stats: Sequence[SellerAccumulator],
    calculate_bonus: BonusStrategy,
) -> list[SellerAccumulator]:
    ranked = sorted(stats, key=lambda s: s.profit, reverse=True)
    total = len(ranked)
    for index, seller in enumerate(ranked):
        seller.bonus = _to_decimal(calculate_bonus(index, total, seller))
        seller.top_products = _top_products(seller.products_sold)
    return ranked


# ── 5. Report ────────────────────────────────────────────────────────────────

def build_report(ranked: Sequence[SellerAccumulator]) -> list[SellerReport]:
    return [
        SellerReport(
            seller_id=s.seller_id,
            name=s.name,
            revenue=_round_money(s.revenue),
            profit=_round_money(s.profit),
            sales_count=s.sales_count,
            top_products=list(s.top_products),
            bonus=_round_money(s.bonus),
        )
        for s in ranked
    ]


def analyze_sales_data(data: Any, options: Any) -> list[SellerReport]:
    """
    Compute the ranked per-seller sales report.

    ``data`` holds ``sellers``, ``products`` and ``purchase_records``;
    ``options`` holds the ``calculate_revenue`` and ``calculate_bonus``
    strategies. Both may be mappings or models. Rows come back ordered by
    profit, highest first.
    """
    dataset = validate_input(data, options)
    calculate_revenue = _field(options, "calculate_revenue")
    calculate_bonus = _field(options, "calculate_bonus")

    stats, seller_index = build_seller_index(dataset.sellers)
    product_index = build_product_index(dataset.products)

    aggregate_purchases(dataset.purchase_records, seller_index, product_index, calculate_revenue)
    ranked = rank_sellers(stats, calculate_bonus)

    logger.debug(
        "Analysed %d purchase records across %d sellers",
        len(dataset.purchase_records), len(ranked),
    )
    return build_report(ranked)
