"""Estimate (proforma) models"""

from typing import List, Optional
from pydantic import Field

from smartbill.models.common import (
    Client,
    DocumentReference,
    Product,
    SmartBillModel,
    SmartBillRecord,
)


class CreateEstimateParams(SmartBillModel):
    """Estimate creation parameters"""

    company_vat_code: str = Field(..., description="Issuing company VAT code")
    client: Client
    is_draft: Optional[bool] = None
    issue_date: Optional[str] = None
    series_name: Optional[str] = None
    currency: Optional[str] = None
    exchange_rate: Optional[float] = None
    language: Optional[str] = None
    precision: Optional[int] = None
    due_date: Optional[str] = None
    mentions: Optional[str] = None
    observations: Optional[str] = None
    products: List[Product]


class EstimateInvoices(SmartBillRecord):
    """Invoices issued from an estimate"""

    are_invoices_created: Optional[bool] = None
    invoices: Optional[List[DocumentReference]] = None
