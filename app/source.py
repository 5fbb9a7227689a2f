"""
Loading the transaction dataset from its remote JSON document.
"""
import logging
from typing import Optional

import requests
from pydantic import TypeAdapter, ValidationError

from app.config import DATA_SOURCE_URL, FETCH_TIMEOUT
from app.models import InitializeResult, Transaction
from app.store import DataStore

logger = logging.getLogger(__name__)

_TRANSACTIONS = TypeAdapter(list[Transaction])


class DataSourceError(Exception):
    """The remote dataset could not be fetched or decoded."""
    pass


def fetch_transactions(
    url: str = DATA_SOURCE_URL,
    timeout: Optional[float] = FETCH_TIMEOUT,
) -> list[Transaction]:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    except (requests.RequestException, ValueError) as exc:
        raise DataSourceError(f"Failed to fetch {url}: {exc}") from exc

    if not isinstance(payload, list):
        raise DataSourceError(f"Expected a JSON array from {url}, got {type(payload).__name__}")

    return _TRANSACTIONS.validate_python(payload)


def initialize(store: DataStore, url: str = DATA_SOURCE_URL) -> InitializeResult:
    """Replace the store contents with a fresh copy of the dataset.

    Failures are reported in the result; the store keeps its previous
    contents in that case.
    """
    try:
        transactions = fetch_transactions(url)
    except (DataSourceError, ValidationError):
        logger.exception("Error initializing database")
        return InitializeResult(success=False, error="Internal server error")

    store.replace(transactions)
    logger.info("Loaded %d transactions from %s", len(transactions), url)
    return InitializeResult(success=True, message="Database initialized successfully")
