import logging
import re
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.config import DATA_SOURCE_URL, INITIALIZE_ON_STARTUP
from app.engine import (
    calculate_statistics,
    generate_pie_chart_data,
    get_combined_data,
    list_transactions,
)
from app.source import initialize
from app.store import store

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Leading-integer parse of a query value; None when there is none.

    "3", " 3", "3.9" and "3abc" all give 3, and a "0x" prefix reads hex
    ("0x1A" gives 26). None is passed on to the query engine, which
    treats it as matching nothing.
    """
    if value is None:
        return None
    m = _LEADING_INT.match(value)
    if not m:
        return None

    sign, digits = m.groups()
    if digits[:2] in ("0x", "0X"):
        if len(digits) == 2:
            return None
        number = int(digits[2:], 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def _dump(model, **kwargs):
    return model.model_dump(mode="json", by_alias=True, **kwargs)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if INITIALIZE_ON_STARTUP:
        result = await run_in_threadpool(initialize, store, DATA_SOURCE_URL)
        if not result.success:
            logger.warning("Startup initialization failed; store is empty")
    yield


app = FastAPI(
    title="Product Transactions Service",
    version="1.0.0",
    description="Monthly listing, statistics and category breakdown of product sales",
    lifespan=lifespan,
)


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.get("/initialize-database", summary="Reload transactions from the data source")
def initialize_database():
    # only the key that applies: message on success, error on failure
    return _dump(initialize(store, DATA_SOURCE_URL), exclude_none=True)


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/transactions", summary="List a month's transactions with search and paging")
def get_transactions(
    month: Optional[str] = Query(default=None, description="Zero-indexed month, 0 = January"),
    search: Optional[str] = Query(default=None),
    page: str = Query(default="1"),
    per_page: str = Query(default="10", alias="perPage"),
):
    result = list_transactions(
        parse_int(month),
        search,
        parse_int(page),
        parse_int(per_page),
        store,
    )
    return _dump(result)


@app.get("/statistics", summary="Sale totals for a month")
def get_statistics(month: Optional[str] = Query(default=None)):
    return _dump(calculate_statistics(parse_int(month), store))


@app.get("/pie-chart", summary="Transaction count per category for a month")
def get_pie_chart(month: Optional[str] = Query(default=None)):
    return [_dump(c) for c in generate_pie_chart_data(parse_int(month), store)]


@app.get("/combined-data", summary="Listing, statistics and pie chart in one response")
def get_combined(
    month: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    per_page: Optional[str] = Query(default=None, alias="perPage"),
):
    try:
        result = get_combined_data(
            parse_int(month),
            search,
            parse_int(page),
            parse_int(per_page),
            store,
        )
    except Exception as exc:
        logger.exception("Combined data request failed")
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return _dump(result)
