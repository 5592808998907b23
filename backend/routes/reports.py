# routes/reports.py
from typing import Optional, List

from fastapi import APIRouter, Depends, Query

from schemas.common import ApiResponse
from schemas.reports import ReportFilter, StockMovementReport
from utils.deps import get_ledger, parse_iso
from utils.ledger import LedgerStore

router = APIRouter(prefix="/reports", tags=["Reports"])


# -----------------------------
# Stock movement per product
# -----------------------------
@router.get("/stock-movement", response_model=ApiResponse[List[StockMovementReport]], response_model_exclude_none=True)
def report_stock_movement(
    start_date: Optional[str] = Query(None, alias="startDate", description="ISO datetime or YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, alias="endDate", description="ISO datetime or YYYY-MM-DD"),
    product_id: Optional[str] = Query(None, alias="productId"),
    category: Optional[str] = Query(None),
    supplier: Optional[str] = Query(None),
    ledger: LedgerStore = Depends(get_ledger),
):
    report_filter = ReportFilter(
        start_date=parse_iso(start_date, "startDate"),
        end_date=parse_iso(end_date, "endDate", end_of_day=True),
        product_id=product_id,
        category=category,
        supplier=supplier,
    )
    rows = ledger.movement_report(report_filter)
    return {"success": True, "data": rows, "count": len(rows)}
