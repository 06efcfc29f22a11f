"""Payment models"""

from typing import List, Literal, Optional, Union
from pydantic import Field

from smartbill.models.common import Client, PaymentType, SmartBillModel


# Receipts (Chitanta) are deleted through their own endpoint
NonReceiptPaymentType = Literal[
    "Bon",
    "Card",
    "CEC",
    "Bilet ordin",
    "Ordin plata",
    "Mandat postal",
    "Alta incasare",
]


class InvoiceReference(SmartBillModel):
    """Invoice settled by a payment"""

    series_name: str
    number: str


class CreatePaymentParams(SmartBillModel):
    """Payment creation parameters"""

    company_vat_code: str = Field(..., description="Company VAT code")
    client: Client
    issue_date: Optional[str] = None
    currency: Optional[str] = None
    language: Optional[str] = None
    exchange_rate: Optional[float] = None
    precision: Optional[int] = None
    value: float = Field(..., description="Payment amount")
    type: PaymentType
    is_cash: Optional[bool] = None
    text: Optional[str] = None
    translated_text: Optional[str] = None
    is_draft: Optional[bool] = None
    observation: Optional[str] = None
    use_invoice_details: Optional[bool] = None
    invoices_list: Optional[List[InvoiceReference]] = None


class ReceiptParams(SmartBillModel):
    """Identifies a receipt by company VAT code and receipt id"""

    cif: str = Field(..., description="Company VAT code")
    id: str = Field(..., description="Receipt id")


class DeletePaymentByInvoice(SmartBillModel):
    """Delete the payment registered against an invoice"""

    company_vat_code: str
    payment_type: NonReceiptPaymentType
    invoice_series: str
    invoice_number: str


class DeletePaymentByDetails(SmartBillModel):
    """Delete a payment identified by its date, value and client"""

    company_vat_code: str
    payment_type: NonReceiptPaymentType
    payment_date: str = Field(..., description="Payment date (YYYY-MM-DD)")
    payment_value: str
    client_name: str
    client_cif: str


DeletePaymentParams = Union[DeletePaymentByInvoice, DeletePaymentByDetails]
