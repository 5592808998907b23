# utils/stock_views.py
"""Read-only views derived from the product and transaction collections.

Everything here is a pure function of its arguments: nothing is cached and
nothing is mutated, so callers recompute on every request.
"""
import uuid
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from schemas.product import Product
from schemas.reports import DashboardStats, ReportFilter, StockAlert, StockMovementReport
from schemas.stock import StockTransaction

SEVERITY_RANK = {"critical": 4, "high": 3, "medium": 2, "low": 1}

# Filter values meaning "no filter" in query strings
ANY = (None, "", "all")


def resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def as_aware(value: datetime, tz: tzinfo = timezone.utc) -> datetime:
    """Naive datetimes are read as wall time in ``tz``."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value


def day_bounds(day: date, tz: tzinfo):
    """Start (inclusive) and end (exclusive) of a calendar day in ``tz``."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def stock_delta(transaction: StockTransaction) -> int:
    if transaction.type == "in":
        return abs(transaction.quantity)
    if transaction.type == "out":
        return -abs(transaction.quantity)
    return transaction.quantity


def apply_delta(current_stock: int, delta: int) -> int:
    return max(0, current_stock + delta)


# =========================
# DASHBOARD
# =========================
def transactions_on_day(transactions: Iterable[StockTransaction], day: date, tz: tzinfo) -> List[StockTransaction]:
    start, end = day_bounds(day, tz)
    return [t for t in transactions if start <= as_aware(t.performed_at) < end]


def compute_dashboard_stats(
    products: List[Product],
    transactions: List[StockTransaction],
    now: Optional[datetime] = None,
    tz: tzinfo = timezone.utc,
) -> DashboardStats:
    now = as_aware(now or datetime.now(timezone.utc))
    today = transactions_on_day(transactions, now.astimezone(tz).date(), tz)

    return DashboardStats(
        total_products=len(products),
        total_value=sum(p.current_stock * p.cost_price for p in products),
        low_stock_items=sum(1 for p in products if p.current_stock <= p.min_stock_level),
        out_of_stock_items=sum(1 for p in products if p.current_stock == 0),
        total_transactions_today=len(today),
        value_movement_today=sum(t.total_value or 0 for t in today),
    )


# =========================
# ALERTS
# =========================
def classify_stock(product: Product):
    """(alert_type, severity) for a product, or None. First match wins."""
    if product.current_stock == 0:
        return "out_of_stock", "critical"
    if product.current_stock <= product.reorder_point:
        severity = "high" if product.current_stock <= product.min_stock_level else "medium"
        return "low_stock", severity
    if product.current_stock >= product.max_stock_level:
        return "overstock", "low"
    return None


def compute_stock_alerts(products: List[Product], now: Optional[datetime] = None) -> List[StockAlert]:
    now = as_aware(now or datetime.now(timezone.utc))
    alerts = []
    for product in products:
        classification = classify_stock(product)
        if classification is None:
            continue
        alert_type, severity = classification
        alerts.append(StockAlert(
            id=uuid.uuid4().hex,
            product_id=product.id,
            product_name=product.name,
            current_stock=product.current_stock,
            min_stock_level=product.min_stock_level,
            reorder_point=product.reorder_point,
            alert_type=alert_type,
            severity=severity,
            created_at=now,
        ))

    # sorted() is stable: equal severities keep product order
    return sorted(alerts, key=lambda a: SEVERITY_RANK[a.severity], reverse=True)


# =========================
# SEARCH & FILTERS
# =========================
def search_products(products: List[Product], query: str) -> List[Product]:
    # An empty query matches every product
    needle = (query or "").lower()
    return [
        p for p in products
        if needle in p.name.lower()
        or needle in p.sku.lower()
        or needle in p.category.lower()
        or needle in p.supplier.lower()
    ]


def filter_products(
    products: List[Product],
    category: Optional[str] = None,
    supplier: Optional[str] = None,
) -> List[Product]:
    result = products
    if category not in ANY:
        result = [p for p in result if p.category == category]
    if supplier not in ANY:
        result = [p for p in result if p.supplier == supplier]
    return result


def filter_transactions(
    transactions: List[StockTransaction],
    products: List[Product],
    report_filter: ReportFilter,
    tz: tzinfo = timezone.utc,
) -> List[StockTransaction]:
    f = report_filter
    result = transactions

    if f.product_id not in ANY:
        result = [t for t in result if t.product_id == f.product_id]
    if f.transaction_type not in ANY:
        result = [t for t in result if t.type == f.transaction_type]
    if f.start_date is not None:
        start = as_aware(f.start_date, tz)
        result = [t for t in result if as_aware(t.performed_at) >= start]
    if f.end_date is not None:
        end = as_aware(f.end_date, tz)
        result = [t for t in result if as_aware(t.performed_at) <= end]

    # Category and supplier live on the product, not on the transaction
    if f.category not in ANY or f.supplier not in ANY:
        allowed = {p.id for p in filter_products(products, f.category, f.supplier)}
        result = [t for t in result if t.product_id in allowed]

    # Most recent first
    return sorted(result, key=lambda t: as_aware(t.performed_at), reverse=True)


# =========================
# STOCK MOVEMENT REPORT
# =========================
def compute_movement_report(
    products: List[Product],
    transactions: List[StockTransaction],
    report_filter: ReportFilter,
    tz: tzinfo = timezone.utc,
) -> List[StockMovementReport]:
    f = report_filter
    start = as_aware(f.start_date, tz) if f.start_date is not None else None
    end = as_aware(f.end_date, tz) if f.end_date is not None else None

    selected = filter_products(products, f.category, f.supplier)
    if f.product_id not in ANY:
        selected = [p for p in selected if p.id == f.product_id]

    by_product: Dict[str, List[StockTransaction]] = {}
    for t in transactions:
        by_product.setdefault(t.product_id, []).append(t)

    rows = []
    for product in selected:
        stock_in = stock_out = adjustments = after_end = 0
        for t in by_product.get(product.id, []):
            performed_at = as_aware(t.performed_at)
            if end is not None and performed_at > end:
                after_end += stock_delta(t)
                continue
            if start is not None and performed_at < start:
                continue
            if t.type == "in":
                stock_in += abs(t.quantity)
            elif t.type == "out":
                stock_out += abs(t.quantity)
            else:
                adjustments += t.quantity

        closing = max(0, product.current_stock - after_end)
        opening = max(0, closing - stock_in + stock_out - adjustments)
        rows.append(StockMovementReport(
            product_id=product.id,
            product_name=product.name,
            opening_stock=opening,
            stock_in=stock_in,
            stock_out=stock_out,
            adjustments=adjustments,
            closing_stock=closing,
            value=closing * product.cost_price,
        ))
    return rows
