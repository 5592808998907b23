# backend/database.py
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# Heroku/Azure style URLs use postgres://, SQLAlchemy requires postgresql://
if SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)


def make_engine(url: str):
    # SQLite connections are shared between the request threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = make_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db(request: Request):
    # The application decides which session factory backs the request
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # Register tables on the metadata before creating them
    import models.collection  # noqa: F401
    import models.log  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
