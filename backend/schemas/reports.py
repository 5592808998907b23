# schemas/reports.py
from datetime import datetime
from typing import List, Literal, Optional

from schemas.common import CamelModel
from schemas.stock import StockTransaction, TransactionType

AlertType = Literal["out_of_stock", "low_stock", "overstock"]
AlertSeverity = Literal["low", "medium", "high", "critical"]


# Headline numbers for the dashboard
class DashboardStats(CamelModel):
    total_products: int
    total_value: float
    low_stock_items: int
    out_of_stock_items: int
    total_transactions_today: int
    value_movement_today: float


# Derived per query, never persisted
class StockAlert(CamelModel):
    id: str
    product_id: str
    product_name: str
    current_stock: int
    min_stock_level: int
    reorder_point: int
    alert_type: AlertType
    severity: AlertSeverity
    created_at: datetime


class DashboardResponse(CamelModel):
    stats: DashboardStats
    alerts: List[StockAlert]
    recent_transactions: List[StockTransaction]


# Filters shared by the transaction listing and the movement report
class ReportFilter(CamelModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    product_id: Optional[str] = None
    category: Optional[str] = None
    supplier: Optional[str] = None
    transaction_type: Optional[TransactionType] = None


# Schemas for the stock movement report
class StockMovementReport(CamelModel):
    product_id: str
    product_name: str
    opening_stock: int
    stock_in: int
    stock_out: int
    adjustments: int
    closing_stock: int
    value: float
