# backend/routes/catalog.py
from fastapi import APIRouter, Depends
from typing import List

from schemas.category import Category
from schemas.common import ApiResponse
from schemas.user import User
from utils.deps import get_ledger
from utils.ledger import LedgerStore

router = APIRouter(tags=["Catalog"])


@router.get("/categories", response_model=ApiResponse[List[Category]], response_model_exclude_none=True)
def list_categories(ledger: LedgerStore = Depends(get_ledger)):
    categories = ledger.get_categories()
    return {"success": True, "data": categories, "count": len(categories)}


@router.get("/users", response_model=ApiResponse[List[User]], response_model_exclude_none=True)
def list_users(ledger: LedgerStore = Depends(get_ledger)):
    users = ledger.get_users()
    return {"success": True, "data": users, "count": len(users)}
