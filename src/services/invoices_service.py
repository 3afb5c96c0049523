"""
Invoices service - persistence rules for invoice records
"""

import logging
from typing import Dict, Any, Optional

import asyncpg
from pydantic import ValidationError

from contracts.invoices import get_invoices_contract
from database.connection import get_db_pool
from models.invoice import InvoiceRecord, InvoicePatch
from services.base_service import (
    BaseService,
    ServiceResult,
    StorageError,
    VALIDATION_ERROR,
    STORAGE_ERROR,
)

logger = logging.getLogger(__name__)

NO_VALID_FIELDS_MESSAGE = "No valid fields provided for update."


def _validation_message(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item.get("loc", []))
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "Invalid request. " + "; ".join(parts)


class InvoicesService(BaseService):
    """Service for invoice record CRUD operations"""

    def __init__(self, db_pool: Optional[asyncpg.Pool]):
        super().__init__(get_invoices_contract(), db_pool)

    def _to_api(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return InvoiceRecord.model_validate(row).model_dump(by_alias=True)

    async def list_invoices(self) -> ServiceResult:
        """Return every invoice in storage-native order"""
        query, params = self._build_select_query()
        try:
            rows = await self._fetch(query, params)
        except StorageError as e:
            return ServiceResult.failure(str(e), STORAGE_ERROR)

        data = [self._to_api(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def get_invoice(self, invoice_id: int) -> ServiceResult:
        """Return the invoices matching an ID; empty when none does"""
        query, params = self._build_select_query(invoice_id)
        try:
            rows = await self._fetch(query, params)
        except StorageError as e:
            return ServiceResult.failure(str(e), STORAGE_ERROR)

        data = [self._to_api(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def create_invoice(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new invoice

        Args:
            data: API-keyed payload carrying all nine fields

        Returns:
            ServiceResult whose meta holds the write metadata
        """
        missing = self.contract.missing_fields(data)
        if missing:
            logger.info(f"Rejected invoice create, missing fields: {missing}")
            required = ", ".join(self.contract.required_field_names())
            return ServiceResult.failure(
                f"Invalid request. All parameters required: {required}",
                VALIDATION_ERROR
            )

        try:
            record = InvoiceRecord.model_validate(data)
        except ValidationError as e:
            return ServiceResult.failure(_validation_message(e), VALIDATION_ERROR)

        query, params = self._build_insert_query(record.model_dump())
        try:
            meta = await self._execute(query, params)
        except StorageError as e:
            return ServiceResult.failure(str(e), STORAGE_ERROR)

        logger.info(f"Created invoice {record.id}")
        return ServiceResult(success=True, count=meta["meta"]["changes"], meta=meta)

    async def update_invoice(self, invoice_id: int, patch: Dict[str, Any]) -> ServiceResult:
        """
        Apply a sparse patch to an invoice

        Blank strings and nulls are dropped before the statement is built; an
        ID that matches no row is reported as success with zero changes.
        """
        try:
            parsed = InvoicePatch.model_validate(patch)
        except ValidationError as e:
            return ServiceResult.failure(_validation_message(e), VALIDATION_ERROR)

        assignments = self.contract.patch_assignments(parsed.model_dump())
        if not assignments:
            return ServiceResult.failure(NO_VALID_FIELDS_MESSAGE, VALIDATION_ERROR)

        query, params = self._build_update_query(invoice_id, assignments)
        try:
            meta = await self._execute(query, params)
        except StorageError as e:
            return ServiceResult.failure(str(e), STORAGE_ERROR)

        changes = meta["meta"]["changes"]
        if changes == 0:
            logger.warning(f"Update matched no invoice with ID {invoice_id}")
        return ServiceResult(success=True, count=changes, meta=meta)

    async def delete_invoice(self, invoice_id: int) -> ServiceResult:
        """Delete an invoice by ID; a missing ID is not an error"""
        query, params = self._build_delete_query(invoice_id)
        try:
            meta = await self._execute(query, params)
        except StorageError as e:
            return ServiceResult.failure(str(e), STORAGE_ERROR)

        changes = meta["meta"]["changes"]
        if changes == 0:
            logger.warning(f"Delete matched no invoice with ID {invoice_id}")
        return ServiceResult(success=True, count=changes, meta=meta)


def get_invoices_service() -> InvoicesService:
    """FastAPI dependency: an invoices service bound to the current pool"""
    return InvoicesService(get_db_pool())
