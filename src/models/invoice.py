"""
Invoice Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class InvoiceRecord(BaseModel):
    """A complete invoice row; attribute names match table columns, aliases match the API"""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    id: int = Field(alias="ID")
    bill_no: str = Field(alias="BillNo")
    slip_no: str = Field(alias="SlipNo")
    customer_id: str = Field(alias="CustomerID")
    customer_name: str = Field(alias="CustomerName")
    products: str = Field(alias="Products")
    quantity: float = Field(alias="Number")
    unit_price: float = Field(alias="UnitPrice")
    invoice_date: str = Field(alias="Date")

class InvoicePatch(BaseModel):
    """Sparse update of the mutable invoice fields; None means not supplied"""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    bill_no: Optional[str] = Field(None, alias="BillNo")
    slip_no: Optional[str] = Field(None, alias="SlipNo")
    customer_id: Optional[str] = Field(None, alias="CustomerID")
    customer_name: Optional[str] = Field(None, alias="CustomerName")
    products: Optional[str] = Field(None, alias="Products")
    quantity: Optional[float] = Field(None, alias="Number")
    unit_price: Optional[float] = Field(None, alias="UnitPrice")
    invoice_date: Optional[str] = Field(None, alias="Date")
