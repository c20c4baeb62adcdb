from pydantic import BaseModel, Field
import datetime
from decimal import Decimal
from typing import Any, Callable, Optional


# ── Input models ─────────────────────────────────────────────────────────────

class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[datetime.date] = None
    position: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: str
    purchase_price: Decimal  # acquisition cost per unit
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None  # catalogue list price


class PurchaseItem(BaseModel):
    sku: str
    quantity: int
    discount: Decimal = Decimal("0")  # percent, e.g. Decimal("10") for 10 %
    sale_price: Decimal


class PurchaseRecord(BaseModel):
    seller_id: str
    total_amount: Decimal
    items: list[PurchaseItem]
    receipt_id: Optional[str] = None
    date: Optional[datetime.date] = None
    customer_id: Optional[str] = None
    total_discount: Optional[Decimal] = None


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Pipeline state ───────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerAccumulator(BaseModel):
    """Running totals for one seller during a single analysis call."""

    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # sku -> quantity, in order of first sale
    products_sold: dict[str, int] = Field(default_factory=dict)
    # filled in by the ranker
    bonus: Decimal = Decimal("0")
    top_products: list[TopProduct] = Field(default_factory=list)


RevenueStrategy = Callable[[PurchaseItem, Product], Any]
BonusStrategy = Callable[[int, int, SellerAccumulator], Any]


class AnalysisOptions(BaseModel):
    # checked by engine.validate_input
    calculate_revenue: Any = None
    calculate_bonus: Any = None


# ── Response models ──────────────────────────────────────────────────────────

class SellerReport(BaseModel, frozen=True):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
