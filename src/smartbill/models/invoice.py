"""Invoice models"""

from typing import List, Literal, Optional
from pydantic import Field

from smartbill.models.common import (
    Client,
    DocumentParams,
    Payment,
    Product,
    SmartBillModel,
    SmartBillRecord,
)


class CreateInvoiceParams(SmartBillModel):
    """Invoice creation parameters"""

    company_vat_code: str = Field(..., description="Issuing company VAT code")
    client: Client
    is_draft: Optional[bool] = None
    issue_date: Optional[str] = Field(None, description="Issue date (YYYY-MM-DD)")
    series_name: Optional[str] = None
    currency: Optional[str] = None
    exchange_rate: Optional[float] = None
    language: Optional[str] = None
    precision: Optional[int] = None
    issuer_cnp: Optional[str] = None
    issuer_name: Optional[str] = None
    due_date: Optional[str] = None
    mentions: Optional[str] = None
    observations: Optional[str] = None
    delegate_name: Optional[str] = None
    delegate_identity_card: Optional[str] = None
    delegate_auto: Optional[str] = None
    delivery_date: Optional[str] = None
    payment_date: Optional[str] = None
    use_stock: Optional[bool] = None
    products: List[Product]
    payment: Optional[Payment] = None


class EstimateReference(SmartBillModel):
    """Estimate an invoice is issued from"""

    series_name: str
    number: str


class CreateInvoiceFromEstimateParams(SmartBillModel):
    """Invoice issued from an existing estimate, reusing its details"""

    company_vat_code: str
    is_draft: bool
    series_name: str
    use_estimate_details: Literal[True] = True
    estimate: EstimateReference
    issue_date: Optional[str] = None
    currency: Optional[str] = None
    language: Optional[str] = None
    precision: Optional[int] = None
    due_date: Optional[str] = None
    mentions: Optional[str] = None
    observations: Optional[str] = None


class ReverseInvoiceParams(SmartBillModel):
    """Reverse (storno) invoice parameters"""

    company_vat_code: str
    series_name: str
    number: str
    issue_date: str = Field(..., description="Issue date of the reversal (YYYY-MM-DD)")


class SendToEmailParams(DocumentParams):
    """
    Send a document by e-mail

    subject and body_text are plain text; the invoice service base64-encodes
    them before sending. Omitted values fall back to the account defaults.
    """

    type: Literal["factura", "proforma"]
    subject: Optional[str] = None
    to: Optional[str] = None
    cc: Optional[str] = None
    bcc: Optional[str] = None
    body_text: Optional[str] = None


class DocumentCreated(SmartBillRecord):
    """Series and number assigned to a newly created document"""

    series: Optional[str] = None
    number: Optional[str] = None


class ReversedDocument(SmartBillRecord):
    """Reversal invoice created by the API"""

    series: Optional[str] = None
    number: Optional[str] = None
    document_url: Optional[str] = None
    document_id: Optional[str] = None
    document_view_url: Optional[str] = None


class PaymentStatus(SmartBillRecord):
    """Payment status of an invoice"""

    invoice_total_amount: Optional[float] = None
    paid_amount: Optional[float] = None
    unpaid_amount: Optional[float] = None
    paid: Optional[bool] = None
