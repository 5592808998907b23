# backend/routes/products.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from schemas.common import ApiResponse
from schemas.product import Product, ProductCreate, ProductUpdate
from schemas.stock import ProductHistory
from utils.deps import get_ledger
from utils.errors import ValidationFailed
from utils.ledger import LedgerStore
from utils import stock_views

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=ApiResponse[List[Product]], response_model_exclude_none=True)
def list_products(
    search: Optional[str] = Query(None, description="Name, SKU, category or supplier fragment"),
    category: Optional[str] = Query(None),
    supplier: Optional[str] = Query(None),
    ledger: LedgerStore = Depends(get_ledger),
):
    products = ledger.get_products()

    if search:
        products = stock_views.search_products(products, search)
    products = stock_views.filter_products(products, category, supplier)

    return {"success": True, "data": products, "count": len(products)}


@router.post("", response_model=ApiResponse[Product], response_model_exclude_none=True)
def create_product(payload: ProductCreate, ledger: LedgerStore = Depends(get_ledger)):
    # SKU uniqueness is checked here, the ledger does not enforce it.
    # The check runs outside the ledger's write lock, so two concurrent
    # requests with the same SKU can both pass it.
    if any(p.sku == payload.sku for p in ledger.get_products()):
        raise ValidationFailed("sku", "SKU already exists")

    product = ledger.create_product(payload)
    return {"success": True, "data": product, "message": "Product created successfully"}


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=ApiResponse[ProductHistory], response_model_exclude_none=True)
def get_product(product_id: str, ledger: LedgerStore = Depends(get_ledger)):
    product = ledger.get_product(product_id)
    transactions = ledger.get_product_transactions(product_id)
    return {"success": True, "data": ProductHistory(product=product, transactions=transactions)}


@router.put("/{product_id}", response_model=ApiResponse[Product], response_model_exclude_none=True)
def update_product(product_id: str, payload: ProductUpdate, ledger: LedgerStore = Depends(get_ledger)):
    product = ledger.update_product(product_id, payload)
    return {"success": True, "data": product, "message": "Product updated successfully"}


@router.delete("/{product_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
def delete_product(product_id: str, ledger: LedgerStore = Depends(get_ledger)):
    ledger.delete_product(product_id)
    return {"success": True, "message": "Product deleted successfully"}
