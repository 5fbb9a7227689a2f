"""
Deterministic sample-data generator.

Produces:
  - 120 transactions sold between June 2021 and May 2022
  - 4 categories: electronics, jewelery, men's clothing, women's clothing
  - prices with 2 dp, roughly 1 in 5 a whole number
  - ~50 % flagged sold (the flag is carried but never queried)
"""

import random
from datetime import datetime, timedelta, timezone

from app.models import Transaction
from app.store import DataStore

SEED = 42
TOTAL = 120
START = datetime(2021, 6, 1, tzinfo=timezone(timedelta(hours=5, minutes=30)))
END   = datetime(2022, 5, 31, 23, 59, 59, tzinfo=START.tzinfo)

CATALOGUE = {
    "electronics":      ["Mouse Pad", "USB Hub", "Monitor 24in", "SSD 1TB"],
    "jewelery":         ["Silver Ring", "Gold Chain", "Pearl Earrings"],
    "men's clothing":   ["Cotton Jacket", "Slim Fit T-Shirt", "Casual Shirt"],
    "women's clothing": ["Rain Jacket", "Short Sleeve Top", "Lock Cardigan"],
}


def _rand_dt(rng: random.Random, lo: datetime = START, hi: datetime = END) -> datetime:
    delta = hi - lo
    secs = rng.randint(0, int(delta.total_seconds()))
    return lo + timedelta(seconds=secs)


def generate(total: int = TOTAL, seed: int = SEED) -> list[Transaction]:
    rng = random.Random(seed)
    categories = sorted(CATALOGUE)

    transactions = []
    for i in range(1, total + 1):
        category = rng.choice(categories)
        title    = rng.choice(CATALOGUE[category])
        if rng.random() < 0.2:
            price = float(rng.randint(5, 900))
        else:
            price = round(rng.uniform(5, 900), 2)

        transactions.append(Transaction(
            id=i,
            title=title,
            description=f"{title} from the {category} range",
            price=price,
            date_of_sale=_rand_dt(rng),
            category=category,
            sold=rng.random() < 0.5,
        ))
    return transactions


def seed(store: DataStore, total: int = TOTAL) -> None:
    store.replace(generate(total))
