# backend/models/collection.py
from sqlalchemy import Column, String, DateTime, JSON, func
from database import Base

# One row per entity collection (products, transactions, suppliers, ...).
# The whole ordered list of records is stored as a single JSON document,
# one document per storage key.
class EntityCollection(Base):
    __tablename__ = "collections"

    # Storage key, e.g. "stock_manager_products"
    entity = Column(String(100), primary_key=True)

    records = Column(JSON, nullable=False, default=list)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
