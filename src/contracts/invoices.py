"""
Invoices resource contract definition
"""

from contracts.base import ResourceContract, ContractField, FieldType

def get_invoices_contract() -> ResourceContract:
    """Get the invoices resource contract"""

    fields = [
        ContractField(
            name="ID",
            column="id",
            type=FieldType.INTEGER,
            writable=False,  # Caller-supplied at creation, immutable afterwards
            primary_key=True
        ),
        ContractField(name="BillNo", column="bill_no", type=FieldType.STRING),
        ContractField(name="SlipNo", column="slip_no", type=FieldType.STRING),
        ContractField(name="CustomerID", column="customer_id", type=FieldType.STRING),
        ContractField(name="CustomerName", column="customer_name", type=FieldType.STRING),
        ContractField(name="Products", column="products", type=FieldType.STRING),
        ContractField(name="Number", column="quantity", type=FieldType.NUMBER),
        ContractField(name="UnitPrice", column="unit_price", type=FieldType.NUMBER),
        ContractField(name="Date", column="invoice_date", type=FieldType.STRING),
    ]

    return ResourceContract(
        version="1.0",
        resource="invoices",
        table="invoices",
        fields=fields
    )
