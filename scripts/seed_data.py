"""
Deterministic test-data generator.

Produces:
  - 5 sellers
  - 20 products in 4 categories, list price 20-80 % above purchase price
  - 300 purchase records spread over 2023
    - 1-5 line items each
    - ~30 % of items carry a 5-25 % discount
  - total_amount / total_discount derived from the items (2 dp)
"""

import random
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP

from app.models import Product, PurchaseItem, PurchaseRecord, Seller
from app.store import DataStore

SEED = 42
START = date(2023, 1, 1)
END   = date(2023, 12, 31)

_TWO_DP = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def _rand_date(rng: random.Random, lo: date = START, hi: date = END) -> date:
    return lo + timedelta(days=rng.randint(0, (hi - lo).days))


def seed(store: DataStore, rng_seed: int = SEED) -> None:
    rng = random.Random(rng_seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        Seller(id="seller_1", first_name="Alexey",  last_name="Petrov",   position="Senior Seller", start_date=date(2021, 3, 1)),
        Seller(id="seller_2", first_name="Ivan",    last_name="Smirnov",  position="Seller",        start_date=date(2022, 1, 10)),
        Seller(id="seller_3", first_name="Maria",   last_name="Sidorova", position="Seller",        start_date=date(2022, 6, 15)),
        Seller(id="seller_4", first_name="Nikolai", last_name="Ivanov",   position="Junior Seller", start_date=date(2023, 2, 1)),
        Seller(id="seller_5", first_name="Elena",   last_name="Kuznetsova", position="Seller",      start_date=date(2021, 9, 20)),
    ]
    for s in sellers:
        store.add_seller(s)

    # ── products ─────────────────────────────────────────────────────────────
    categories = {
        "Electronics": (100, 900),
        "Home":        (10,  200),
        "Garden":      (5,   150),
        "Toys":        (5,   80),
    }
    products: list[Product] = []
    for n in range(1, 21):
        category = rng.choice(list(categories))
        lo, hi = categories[category]
        purchase_price = _money(Decimal(str(rng.uniform(lo, hi))))
        markup = Decimal(str(round(rng.uniform(1.2, 1.8), 2)))
        products.append(Product(
            sku=f"SKU_{n:03d}",
            name=f"{category} item {n}",
            category=category,
            purchase_price=purchase_price,
            sale_price=_money(purchase_price * markup),
        ))
    for p in products:
        store.add_product(p)

    # ── purchase records ─────────────────────────────────────────────────────
    for n in range(1, 301):
        items: list[PurchaseItem] = []
        for product in rng.sample(products, rng.randint(1, 5)):
            discount = Decimal(rng.choice([5, 10, 15, 20, 25])) if rng.random() < 0.3 else Decimal("0")
            items.append(PurchaseItem(
                sku=product.sku,
                quantity=rng.randint(1, 10),
                discount=discount,
                sale_price=product.sale_price,
            ))

        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        net = sum(
            (i.sale_price * i.quantity * (1 - i.discount / 100) for i in items),
            Decimal("0"),
        )
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n}",
            date=_rand_date(rng),
            seller_id=rng.choice(sellers).id,
            customer_id=f"customer_{rng.randint(1, 100)}",
            items=items,
            total_amount=_money(net),
            total_discount=_money(gross - net),
        ))
