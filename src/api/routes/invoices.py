"""
Invoices API routes
"""

import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException

from services.base_service import ServiceResult, VALIDATION_ERROR
from services.invoices_service import InvoicesService, get_invoices_service

router = APIRouter()
logger = logging.getLogger(__name__)

def _raise_for_result(result: ServiceResult):
    """Map a failed ServiceResult onto an HTTP error"""
    if result.success:
        return
    if result.error_type == VALIDATION_ERROR:
        raise HTTPException(status_code=400, detail=result.error)
    else:
        raise HTTPException(status_code=500, detail=result.error)

@router.get("", response_model=List[Dict[str, Any]])
async def list_invoices(service: InvoicesService = Depends(get_invoices_service)):
    """List all invoices"""
    result = await service.list_invoices()
    _raise_for_result(result)
    return result.data

@router.get("/{invoice_id}", response_model=List[Dict[str, Any]])
async def get_invoice(
    invoice_id: int,
    service: InvoicesService = Depends(get_invoices_service)
):
    """Get invoices matching an ID; an unknown ID yields an empty array"""
    result = await service.get_invoice(invoice_id)
    _raise_for_result(result)
    return result.data

@router.post("")
async def create_invoice(
    payload: Dict[str, Any] = Body(...),
    service: InvoicesService = Depends(get_invoices_service)
):
    """Create a new invoice; every field including ID is required"""
    result = await service.create_invoice(payload)
    _raise_for_result(result)
    return {"result": result.meta}

@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: int,
    payload: Dict[str, Any] = Body(...),
    service: InvoicesService = Depends(get_invoices_service)
):
    """Partially update an invoice; blank text fields are ignored"""
    result = await service.update_invoice(invoice_id, payload)
    _raise_for_result(result)
    return {"result": result.meta}

@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: int,
    service: InvoicesService = Depends(get_invoices_service)
):
    """Delete an invoice"""
    result = await service.delete_invoice(invoice_id)
    _raise_for_result(result)
    return {"result": result.meta}
