import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException

from app.config import settings
from app.engine import analyze_sales_data
from app.errors import InvalidInputError, LookupFault
from app.models import AnalysisOptions, SellerReport
from app.store import store
from app.strategies import calculate_bonus_by_profit, calculate_simple_revenue

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DATASET_PATH:
        store.load_json(settings.DATASET_PATH)
        logger.info("Loaded dataset from %s", settings.DATASET_PATH)
    elif settings.SEED_ON_STARTUP:
        # Auto-seed on startup so the service is immediately usable
        from scripts.seed_data import seed
        seed(store, settings.SEED)
        logger.info("Seeded store with %d purchase records", len(store.purchase_records))
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Seller sales performance and bonus report",
    lifespan=lifespan,
)


def _report(data: Any) -> list[SellerReport]:
    try:
        return analyze_sales_data(data, DEFAULT_OPTIONS)
    except (InvalidInputError, LookupFault) as exc:
        logger.warning("Sales analysis failed: %s", exc)
        raise HTTPException(422, str(exc))


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


@app.get("/api/v1/sellers/{seller_id}/report", summary="Get one seller's report row")
def get_seller_report(seller_id: str):
    if not store.get_seller(seller_id):
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    rows = _report(store.dataset())
    rank = next(i for i, row in enumerate(rows) if row.seller_id == seller_id)
    return {"rank": rank, "total": len(rows), **rows[rank].model_dump()}


# ── Products ─────────────────────────────────────────────────────────────────

@app.get("/api/v1/products", summary="List the product catalogue")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sales", summary="Sales report over the loaded dataset")
def get_sales_report():
    return {"report": [row.model_dump() for row in _report(store.dataset())]}


@app.post("/api/v1/reports/sales", summary="Sales report over a posted dataset")
def post_sales_report(payload: dict = Body(...)):
    return {"report": [row.model_dump() for row in _report(payload)]}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed test data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store, settings.SEED)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
