# backend/routes/stock.py
from fastapi import APIRouter, Depends, Query
from typing import Optional, List

from schemas.common import ApiResponse
from schemas.reports import ReportFilter
from schemas.stock import StockTransaction, StockTransactionCreate
from utils.deps import get_ledger, parse_iso
from utils.errors import InsufficientStock
from utils.ledger import LedgerStore

router = APIRouter(prefix="/transactions", tags=["Stock"])


@router.get("", response_model=ApiResponse[List[StockTransaction]], response_model_exclude_none=True)
def list_transactions(
    product_id: Optional[str] = Query(None, alias="productId"),
    type: Optional[str] = Query(None, description="in, out, adjustment or all"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    ledger: LedgerStore = Depends(get_ledger),
):
    report_filter = ReportFilter(
        product_id=product_id,
        start_date=parse_iso(start_date, "startDate"),
        end_date=parse_iso(end_date, "endDate", end_of_day=True),
    )
    transactions = ledger.find_transactions(report_filter)

    # Normalize movement type, "all" means no filter
    wanted = (type or "").lower()
    if wanted and wanted != "all":
        transactions = [t for t in transactions if t.type == wanted]

    return {"success": True, "data": transactions, "count": len(transactions)}


@router.post("", response_model=ApiResponse[StockTransaction], response_model_exclude_none=True)
def create_transaction(payload: StockTransactionCreate, ledger: LedgerStore = Depends(get_ledger)):
    product = ledger.get_product(payload.product_id)

    # Reject stock-out past the available quantity before touching the ledger
    if payload.type == "out" and payload.quantity > product.current_stock:
        raise InsufficientStock(product.current_stock, payload.quantity, product.unit)

    transaction = ledger.create_transaction(payload)
    return {"success": True, "data": transaction, "message": "Transaction recorded successfully"}
