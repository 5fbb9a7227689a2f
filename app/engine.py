import math
from typing import Optional, Sequence, Union

from app.models import (
    Transaction,
    TransactionPage,
    Statistics,
    CategoryCount,
    CombinedData,
)
from app.store import DataStore


def _in_month(transactions: Sequence[Transaction], month: Optional[int]) -> list[Transaction]:
    # an unparseable month matches nothing
    if month is None:
        return []
    return [t for t in transactions if t.sale_month == month]


def _price_text(price: Union[int, float]) -> str:
    # whole prices render as "44", not "44.0"
    if isinstance(price, int) or price.is_integer():
        return str(int(price))
    return repr(price)


def _matches(txn: Transaction, search: str) -> bool:
    needle = search.lower()
    return (
        needle in txn.title.lower()
        or needle in txn.description.lower()
        or search in _price_text(txn.price)
    )


def _paginate(
    items: list[Transaction],
    page: Optional[int],
    per_page: Optional[int],
) -> tuple[list[Transaction], Optional[int]]:
    if per_page is None or per_page == 0:
        return [], None

    total = len(items)
    total_pages = math.ceil(total / per_page)
    if page is None:
        return [], total_pages

    start = (page - 1) * per_page
    end = min(start + per_page, total)
    return items[start:end], total_pages


def list_transactions(
    month: Optional[int],
    search: Optional[str],
    page: Optional[int],
    per_page: Optional[int],
    store: DataStore,
) -> TransactionPage:
    filtered = _in_month(store.transactions, month)

    if search:
        filtered = [t for t in filtered if _matches(t, search)]

    rows, total_pages = _paginate(filtered, page, per_page)
    return TransactionPage(transactions=rows, total_pages=total_pages)


def calculate_statistics(month: Optional[int], store: DataStore) -> Statistics:
    transactions = store.transactions
    in_month = _in_month(transactions, month)

    return Statistics(
        total_sale_amount=sum(t.price for t in in_month),
        total_sold_items=len(in_month),
        total_not_sold_items=len(transactions) - len(in_month),
    )


def generate_pie_chart_data(month: Optional[int], store: DataStore) -> list[CategoryCount]:
    counts: dict[str, int] = {}
    for txn in _in_month(store.transactions, month):
        counts[txn.category] = counts.get(txn.category, 0) + 1

    return [CategoryCount(category=c, count=n) for c, n in counts.items()]


def get_combined_data(
    month: Optional[int],
    search: Optional[str],
    page: Optional[int],
    per_page: Optional[int],
    store: DataStore,
) -> CombinedData:
    """List, statistics and pie chart for one request.

    All three are computed from a single snapshot, so a concurrent
    re-initialization cannot split them across two datasets.
    """
    snapshot = store.snapshot()
    return CombinedData(
        transactions=list_transactions(month, search, page, per_page, snapshot),
        statistics=calculate_statistics(month, snapshot),
        pie_chart_data=generate_pie_chart_data(month, snapshot),
    )
