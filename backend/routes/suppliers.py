# backend/routes/suppliers.py
from fastapi import APIRouter, Depends
from typing import List

from schemas.common import ApiResponse
from schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from utils.deps import get_ledger
from utils.ledger import LedgerStore

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=ApiResponse[List[Supplier]], response_model_exclude_none=True)
def list_suppliers(ledger: LedgerStore = Depends(get_ledger)):
    suppliers = ledger.get_suppliers()
    return {"success": True, "data": suppliers, "count": len(suppliers)}


@router.get("/{supplier_id}", response_model=ApiResponse[Supplier], response_model_exclude_none=True)
def get_supplier(supplier_id: str, ledger: LedgerStore = Depends(get_ledger)):
    return {"success": True, "data": ledger.get_supplier(supplier_id)}


@router.post("", response_model=ApiResponse[Supplier], response_model_exclude_none=True)
def create_supplier(payload: SupplierCreate, ledger: LedgerStore = Depends(get_ledger)):
    supplier = ledger.create_supplier(payload)
    return {"success": True, "data": supplier, "message": "Supplier created successfully"}


@router.put("/{supplier_id}", response_model=ApiResponse[Supplier], response_model_exclude_none=True)
def update_supplier(supplier_id: str, payload: SupplierUpdate, ledger: LedgerStore = Depends(get_ledger)):
    supplier = ledger.update_supplier(supplier_id, payload)
    return {"success": True, "data": supplier, "message": "Supplier updated successfully"}
