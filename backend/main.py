# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from config import settings, Settings
from database import SessionLocal, engine, init_db
from utils.exception_handler import setup_exception_handlers
from utils.ledger import LedgerStore
from utils.stock_views import resolve_timezone

# Routers
from routes.products import router as products_router
from routes.stock import router as stock_router
from routes.stats import router as stats_router
from routes.suppliers import router as suppliers_router
from routes.catalog import router as catalog_router
from routes.reports import router as reports_router
from routes.logs import router as logs_router

logger = logging.getLogger(__name__)


def create_app(session_factory=None, app_settings: Settings = None, defaults=None) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.LOG_LEVEL.upper())

    # Tests pass their own session factory and create the tables themselves
    owns_database = session_factory is None
    session_factory = session_factory or SessionLocal

    ledger = LedgerStore(
        session_factory,
        defaults=defaults,
        strict_stock=app_settings.STRICT_STOCK_CHECK,
        tz=resolve_timezone(app_settings.TIMEZONE),
        prefix=app_settings.STORAGE_PREFIX,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_database:
            init_db(engine)
        if app_settings.SEED_SAMPLE_DATA:
            ledger.initialize_data()
        logger.info("Stock Manager API started (strict stock check: %s)", app_settings.STRICT_STOCK_CHECK)
        yield

    app = FastAPI(title="Stock Manager API", version="1.0.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.session_factory = session_factory
    app.state.ledger = ledger

    # CORS Configuration
    origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    if app_settings.FRONTEND_URL:
        origins.append(app_settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(products_router)
    app.include_router(stock_router)
    app.include_router(stats_router)
    app.include_router(suppliers_router)
    app.include_router(catalog_router)
    app.include_router(reports_router)
    app.include_router(logs_router)

    @app.get("/")
    def read_root():
        return {"message": "Stock Manager API is running"}

    return app


app = create_app()
