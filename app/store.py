from typing import Iterable
from app.models import Transaction


class DataStore:
    """Ordered, replace-only collection of transactions."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self.transactions: tuple[Transaction, ...] = tuple(transactions)

    # ── writes ────────────────────────────────────────────────────────────────

    def replace(self, transactions: Iterable[Transaction]) -> None:
        # single reference swap; readers holding the old tuple keep it
        self.transactions = tuple(transactions)

    def clear(self) -> None:
        self.transactions = ()

    # ── reads ─────────────────────────────────────────────────────────────────

    def snapshot(self) -> "DataStore":
        return DataStore(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)


# module-level singleton used by the app
store = DataStore()
