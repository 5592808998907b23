# backend/routes/stats.py

from fastapi import APIRouter, Depends, Request
from typing import List

from schemas.common import ApiResponse
from schemas.reports import DashboardResponse, StockAlert
from utils.deps import get_ledger
from utils.ledger import LedgerStore
from utils.stock_views import as_aware

router = APIRouter(
    prefix="/dashboard",
    tags=["Stats"]
)


# === Endpoint 1: Dashboard Summary ===

@router.get("", response_model=ApiResponse[DashboardResponse], response_model_exclude_none=True)
def get_dashboard(request: Request, ledger: LedgerStore = Depends(get_ledger)):
    settings = request.app.state.settings

    stats = ledger.dashboard_stats()
    alerts = ledger.stock_alerts()

    # Most recent transactions first
    recent = sorted(ledger.get_transactions(), key=lambda t: as_aware(t.performed_at), reverse=True)

    return {
        "success": True,
        "data": DashboardResponse(
            stats=stats,
            alerts=alerts[:settings.DASHBOARD_ALERT_LIMIT],
            recent_transactions=recent[:settings.DASHBOARD_RECENT_LIMIT],
        ),
    }


# === Endpoint 2: All Stock Alerts ===

@router.get("/alerts", response_model=ApiResponse[List[StockAlert]], response_model_exclude_none=True)
def get_stock_alerts(ledger: LedgerStore = Depends(get_ledger)):
    alerts = ledger.stock_alerts()
    return {"success": True, "data": alerts, "count": len(alerts)}
