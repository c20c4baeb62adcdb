import json
from pathlib import Path
from typing import Optional, Union

from app.models import Product, PurchaseRecord, SalesDataset, Seller


class DataStore:
    def __init__(self) -> None:
        self.sellers: dict[str, Seller] = {}
        self.products: dict[str, Product] = {}
        self.purchase_records: list[PurchaseRecord] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: Seller) -> None:
        self.sellers[seller.id] = seller

    def add_product(self, product: Product) -> None:
        self.products[product.sku] = product

    def add_purchase_record(self, record: PurchaseRecord) -> None:
        self.purchase_records.append(record)

    def clear(self) -> None:
        self.sellers.clear()
        self.products.clear()
        self.purchase_records.clear()

    def load_dataset(self, dataset: SalesDataset) -> None:
        for seller in dataset.sellers:
            self.add_seller(seller)
        for product in dataset.products:
            self.add_product(product)
        for record in dataset.purchase_records:
            self.add_purchase_record(record)

    def load_json(self, path: Union[str, Path]) -> None:
        """Load a JSON file shaped like ``SalesDataset``. Raises ValidationError on bad data."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        self.load_dataset(SalesDataset.model_validate(raw))

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> Optional[Seller]:
        return self.sellers.get(seller_id)

    def get_product(self, sku: str) -> Optional[Product]:
        return self.products.get(sku)

    def list_sellers(self) -> list[Seller]:
        return list(self.sellers.values())

    def list_products(self) -> list[Product]:
        return list(self.products.values())

    def list_purchase_records(self) -> list[PurchaseRecord]:
        return list(self.purchase_records)

    def get_records_for_seller(self, seller_id: str) -> list[PurchaseRecord]:
        return [r for r in self.purchase_records if r.seller_id == seller_id]

    def dataset(self) -> SalesDataset:
        return SalesDataset(
            sellers=self.list_sellers(),
            products=self.list_products(),
            purchase_records=self.list_purchase_records(),
        )


# module-level singleton used by the app
store = DataStore()
