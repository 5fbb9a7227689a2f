from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, Union


class Transaction(BaseModel):
    # id, image and any other source fields ride along as extras
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    description: str
    price: Union[int, float]  # source ints stay ints
    date_of_sale: datetime = Field(alias="dateOfSale")
    category: str
    sold: bool = False

    @property
    def sale_month(self) -> int:
        """Zero-indexed month (0 = January) in the timestamp's own offset."""
        return self.date_of_sale.month - 1


# ── Response models ──────────────────────────────────────────────────────────

class TransactionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: list[Transaction]
    # None when page / perPage could not be parsed or perPage is 0
    total_pages: Optional[int] = Field(alias="totalPages")


class Statistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(alias="totalSaleAmount")
    total_sold_items: int = Field(alias="totalSoldItems")
    # records outside the month, not an inventory status
    total_not_sold_items: int = Field(alias="totalNotSoldItems")


class CategoryCount(BaseModel):
    category: str
    count: int


class CombinedData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: TransactionPage
    statistics: Statistics
    pie_chart_data: list[CategoryCount] = Field(alias="pieChartData")


class InitializeResult(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
