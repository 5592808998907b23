from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import Settings
from database import init_db
from main import create_app
from schemas.product import Product
from utils.ledger import LedgerStore

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_factory():
    # One shared in-memory connection, visible to every session
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def ledger(session_factory):
    """Empty ledger (no sample data), strict stock checks."""
    return LedgerStore(session_factory, defaults={})


@pytest.fixture
def lenient_ledger(session_factory):
    """Empty ledger in the legacy clamp-to-zero mode."""
    return LedgerStore(session_factory, defaults={}, strict_stock=False)


@pytest.fixture
def sample_ledger(session_factory):
    return LedgerStore(session_factory)


@pytest.fixture
def client(session_factory):
    app_settings = Settings(_env_file=None, SEED_SAMPLE_DATA=True, STRICT_STOCK_CHECK=True, TIMEZONE="UTC")
    app = create_app(session_factory=session_factory, app_settings=app_settings)
    with TestClient(app) as test_client:
        yield test_client


def product_payload(**overrides):
    payload = {
        "name": "Cordless Drill",
        "sku": "DRILL-18V",
        "category": "Tools",
        "supplier": "Acme Tools",
        "costPrice": 60.0,
        "sellingPrice": 99.0,
        "currentStock": 10,
        "minStockLevel": 2,
        "maxStockLevel": 40,
        "reorderPoint": 5,
    }
    payload.update(overrides)
    return payload


def make_product(**overrides) -> Product:
    fields = {
        "id": "p1",
        "name": "Cordless Drill",
        "sku": "DRILL-18V",
        "category": "Tools",
        "supplier": "Acme Tools",
        "cost_price": 60.0,
        "selling_price": 99.0,
        "current_stock": 10,
        "min_stock_level": 2,
        "max_stock_level": 40,
        "reorder_point": 5,
        "created_at": NOW,
        "updated_at": NOW,
    }
    fields.update(overrides)
    return Product(**fields)
