# utils/ledger.py
import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from schemas.category import Category
from schemas.product import Product, ProductCreate, ProductUpdate
from schemas.reports import DashboardStats, ReportFilter, StockAlert, StockMovementReport
from schemas.stock import StockTransaction, StockTransactionCreate
from schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from schemas.user import User
from utils import stock_views
from utils.audit import write_log
from utils.errors import InsufficientStock, NotFound, validation_failed_from
from utils.sample_data import SAMPLE_COLLECTIONS
from utils.storage import ENTITIES, CollectionStorage

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def _validate(model: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise validation_failed_from(exc) from exc


def _find(items: List[M], entity: str, entity_id: str) -> M:
    for item in items:
        if item.id == entity_id:
            return item
    raise NotFound(entity, entity_id)


class LedgerStore:
    """Authoritative products/transactions ledger and its reference data.

    Owns a session factory and a write lock. Every mutating operation runs in
    one unit of work: all collections it touches, plus its audit entry, are
    committed together or rolled back together.
    """

    def __init__(
        self,
        session_factory,
        *,
        defaults: Optional[Mapping[str, List[Dict[str, Any]]]] = None,
        strict_stock: bool = True,
        tz: tzinfo = timezone.utc,
        prefix: str = "stock_manager_",
    ):
        self._session_factory = session_factory
        self._defaults = SAMPLE_COLLECTIONS if defaults is None else defaults
        self._lock = threading.RLock()
        self.strict_stock = strict_stock
        self.tz = tz
        self.prefix = prefix

    # -------------------------
    # Sessions
    # -------------------------
    def _storage(self, db) -> CollectionStorage:
        return CollectionStorage(db, self._defaults, prefix=self.prefix)

    @contextmanager
    def _reader(self) -> Iterator[CollectionStorage]:
        db = self._session_factory()
        try:
            yield self._storage(db)
        finally:
            db.close()

    @contextmanager
    def _unit_of_work(self) -> Iterator[CollectionStorage]:
        with self._lock:
            db = self._session_factory()
            try:
                yield self._storage(db)
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def _load(self, storage: CollectionStorage, entity: str, model: Type[M]) -> List[M]:
        return [model.model_validate(record) for record in storage.load(entity)]

    def _save(self, storage: CollectionStorage, entity: str, items: List[BaseModel]) -> None:
        storage.save(entity, [item.to_record() for item in items])

    # -------------------------
    # Products
    # -------------------------
    def get_products(self) -> List[Product]:
        with self._reader() as storage:
            return self._load(storage, "products", Product)

    def get_product(self, product_id: str) -> Product:
        return _find(self.get_products(), "Product", product_id)

    def create_product(self, data: Union[ProductCreate, Mapping[str, Any]]) -> Product:
        payload = _validate(ProductCreate, data)
        now = _now()
        product = Product(**payload.model_dump(), id=_new_id(), created_at=now, updated_at=now)

        with self._unit_of_work() as storage:
            products = self._load(storage, "products", Product)
            products.append(product)
            self._save(storage, "products", products)
            write_log(storage.db, actor=None, action="PRODUCT_CREATE", resource="products",
                      meta={"id": product.id, "sku": product.sku})

        logger.info("Created product %s (%s)", product.id, product.sku)
        return product

    def update_product(self, product_id: str, updates: Union[ProductUpdate, Mapping[str, Any]]) -> Product:
        changes = _validate(ProductUpdate, updates).model_dump(exclude_unset=True)

        with self._unit_of_work() as storage:
            products = self._load(storage, "products", Product)
            current = _find(products, "Product", product_id)
            merged = {**current.model_dump(), **changes, "updated_at": _now()}
            updated = _validate(Product, merged)
            products[products.index(current)] = updated
            self._save(storage, "products", products)
            write_log(storage.db, actor=None, action="PRODUCT_UPDATE", resource="products",
                      meta={"id": product_id, "fields": sorted(changes)})

        return updated

    def delete_product(self, product_id: str) -> None:
        with self._unit_of_work() as storage:
            products = self._load(storage, "products", Product)
            remaining = [p for p in products if p.id != product_id]
            if len(remaining) == len(products):
                raise NotFound("Product", product_id)
            self._save(storage, "products", remaining)
            write_log(storage.db, actor=None, action="PRODUCT_DELETE", resource="products",
                      meta={"id": product_id})

        logger.info("Deleted product %s", product_id)

    def get_product_transactions(self, product_id: str) -> List[StockTransaction]:
        return [t for t in self.get_transactions() if t.product_id == product_id]

    # -------------------------
    # Stock transactions
    # -------------------------
    def get_transactions(self) -> List[StockTransaction]:
        with self._reader() as storage:
            return self._load(storage, "transactions", StockTransaction)

    def create_transaction(self, data: Union[StockTransactionCreate, Mapping[str, Any]]) -> StockTransaction:
        payload = _validate(StockTransactionCreate, data)

        # Sign already checked: in/out are positive, adjustment is signed
        quantity = payload.quantity
        total_value = payload.unit_price * abs(quantity) if payload.unit_price is not None else None

        with self._unit_of_work() as storage:
            products = self._load(storage, "products", Product)
            product = _find(products, "Product", payload.product_id)

            if self.strict_stock and payload.type == "out" and quantity > product.current_stock:
                raise InsufficientStock(product.current_stock, quantity, product.unit)

            now = _now()
            transaction = StockTransaction(
                id=_new_id(),
                product_id=product.id,
                product_name=product.name,
                type=payload.type,
                quantity=quantity,
                unit_price=payload.unit_price,
                total_value=total_value,
                reason=payload.reason,
                reference=payload.reference,
                performed_by=payload.performed_by,
                performed_at=now,
                notes=payload.notes,
            )
            transactions = self._load(storage, "transactions", StockTransaction)
            transactions.append(transaction)
            self._save(storage, "transactions", transactions)

            # Stock mutation, staged in the same unit of work as the append
            delta = stock_views.stock_delta(transaction)
            if product.current_stock + delta < 0:
                logger.warning("Stock of product %s clamped to 0 (would be %s)",
                               product.id, product.current_stock + delta)
            updated = product.model_copy(update={
                "current_stock": stock_views.apply_delta(product.current_stock, delta),
                "updated_at": now,
            })
            products[products.index(product)] = updated
            self._save(storage, "products", products)

            write_log(storage.db, actor=payload.performed_by, action="STOCK_TRANSACTION", resource="stock",
                      meta={"id": transaction.id, "product_id": product.id, "type": transaction.type,
                            "quantity": quantity, "stock": updated.current_stock})

        return transaction

    # -------------------------
    # Suppliers
    # -------------------------
    def get_suppliers(self) -> List[Supplier]:
        with self._reader() as storage:
            return self._load(storage, "suppliers", Supplier)

    def get_supplier(self, supplier_id: str) -> Supplier:
        return _find(self.get_suppliers(), "Supplier", supplier_id)

    def create_supplier(self, data: Union[SupplierCreate, Mapping[str, Any]]) -> Supplier:
        payload = _validate(SupplierCreate, data)
        supplier = Supplier(**payload.model_dump(), id=_new_id(), created_at=_now())

        with self._unit_of_work() as storage:
            suppliers = self._load(storage, "suppliers", Supplier)
            suppliers.append(supplier)
            self._save(storage, "suppliers", suppliers)
            write_log(storage.db, actor=None, action="SUPPLIER_CREATE", resource="suppliers",
                      meta={"id": supplier.id})

        logger.info("Created supplier %s", supplier.id)
        return supplier

    def update_supplier(self, supplier_id: str, updates: Union[SupplierUpdate, Mapping[str, Any]]) -> Supplier:
        changes = _validate(SupplierUpdate, updates).model_dump(exclude_unset=True)

        with self._unit_of_work() as storage:
            suppliers = self._load(storage, "suppliers", Supplier)
            current = _find(suppliers, "Supplier", supplier_id)
            updated = _validate(Supplier, {**current.model_dump(), **changes})
            suppliers[suppliers.index(current)] = updated
            self._save(storage, "suppliers", suppliers)
            write_log(storage.db, actor=None, action="SUPPLIER_UPDATE", resource="suppliers",
                      meta={"id": supplier_id, "fields": sorted(changes)})

        return updated

    # -------------------------
    # Reference data
    # -------------------------
    def get_categories(self) -> List[Category]:
        with self._reader() as storage:
            return self._load(storage, "categories", Category)

    def get_users(self) -> List[User]:
        with self._reader() as storage:
            return self._load(storage, "users", User)

    def initialize_data(self) -> List[str]:
        """Persist the default records of every collection not saved yet."""
        seeded = []
        with self._unit_of_work() as storage:
            for entity in ENTITIES:
                if not storage.exists(entity):
                    storage.save(entity, storage.load(entity))
                    seeded.append(entity)
        if seeded:
            logger.info("Seeded collections: %s", ", ".join(seeded))
        return seeded

    # -------------------------
    # Derived views
    # -------------------------
    def dashboard_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        return stock_views.compute_dashboard_stats(self.get_products(), self.get_transactions(), now, self.tz)

    def stock_alerts(self, now: Optional[datetime] = None) -> List[StockAlert]:
        return stock_views.compute_stock_alerts(self.get_products(), now)

    def search_products(self, query: str) -> List[Product]:
        return stock_views.search_products(self.get_products(), query)

    def products_by_category(self, category: str) -> List[Product]:
        return [p for p in self.get_products() if p.category == category]

    def products_by_supplier(self, supplier: str) -> List[Product]:
        return [p for p in self.get_products() if p.supplier == supplier]

    def find_transactions(self, report_filter: ReportFilter) -> List[StockTransaction]:
        return stock_views.filter_transactions(self.get_transactions(), self.get_products(), report_filter, self.tz)

    def movement_report(self, report_filter: ReportFilter) -> List[StockMovementReport]:
        return stock_views.compute_movement_report(self.get_products(), self.get_transactions(), report_filter, self.tz)
