# backend/schemas/product.py
from datetime import datetime
from pydantic import Field
from typing import Literal, Optional

from schemas.common import CamelModel

ProductStatus = Literal["active", "inactive", "discontinued"]


# Shared base attributes for product entities
class ProductBase(CamelModel):
    name: str = Field(min_length=1)
    description: str = ""
    sku: str = Field(min_length=1)
    category: str
    supplier: str
    cost_price: float = Field(ge=0)
    selling_price: float = Field(ge=0)
    current_stock: int = Field(default=0, ge=0)
    min_stock_level: int = 0
    max_stock_level: int = 100
    reorder_point: int = 10
    unit: str = "pieces"
    location: str = ""
    status: ProductStatus = "active"


# Payload accepted by the ledger when creating a product
class ProductCreate(ProductBase):
    pass


# Schema for partial product updates, all fields optional
class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    sku: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    supplier: Optional[str] = None
    cost_price: Optional[float] = Field(None, ge=0)
    selling_price: Optional[float] = Field(None, ge=0)
    current_stock: Optional[int] = Field(None, ge=0)
    min_stock_level: Optional[int] = None
    max_stock_level: Optional[int] = None
    reorder_point: Optional[int] = None
    unit: Optional[str] = None
    location: Optional[str] = None
    status: Optional[ProductStatus] = None


# Stored product record
class Product(ProductBase):
    id: str
    created_at: datetime
    updated_at: datetime
