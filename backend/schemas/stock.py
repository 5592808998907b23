# backend/schemas/stock.py
from datetime import datetime
from pydantic import Field, ValidationInfo, field_validator
from typing import List, Literal, Optional

from schemas.common import CamelModel
from schemas.product import Product

# Define allowed types for stock transactions
TransactionType = Literal["in", "out", "adjustment"]


# Schema for recording a new stock transaction.
# in/out quantities must be positive, the type gives the direction;
# adjustment quantities are signed and applied as given.
class StockTransactionCreate(CamelModel):
    product_id: str = Field(min_length=1)
    type: TransactionType
    quantity: int
    unit_price: Optional[float] = Field(default=None, ge=0)
    reason: str = Field(min_length=1)
    reference: str = ""
    performed_by: str = "admin"
    notes: str = ""

    @field_validator("quantity")
    @classmethod
    def quantity_sign(cls, value: int, info: ValidationInfo) -> int:
        if value == 0:
            raise ValueError("quantity must not be zero")
        if value < 0 and info.data.get("type") in ("in", "out"):
            raise ValueError("quantity must be positive for in and out transactions")
        return value


# Stored transaction record; immutable once written
class StockTransaction(CamelModel):
    id: str
    product_id: str
    # Product name at the time of the transaction, not kept in sync with renames
    product_name: str
    type: TransactionType
    quantity: int
    unit_price: Optional[float] = None
    total_value: Optional[float] = None
    reason: str
    reference: str = ""
    performed_by: str
    performed_at: datetime
    notes: str = ""


# Product detail with its transaction history
class ProductHistory(CamelModel):
    product: Product
    transactions: List[StockTransaction]
