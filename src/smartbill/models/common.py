"""Shared SmartBill models: parties, product lines and payments"""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


PaymentType = Literal[
    "Chitanta",
    "Bon",
    "Card",
    "CEC",
    "Bilet ordin",
    "Ordin plata",
    "Mandat postal",
    "Alta incasare",
]


class SmartBillModel(BaseModel):
    """
    Base for every SmartBill record

    Fields are snake_case in Python and camelCase on the wire. Unknown
    fields in API responses are ignored.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset fields"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class SmartBillRecord(SmartBillModel):
    """
    Base for records decoded from API responses

    Every field is optional and numbers are accepted where text is expected,
    so a well-formed response is never rejected over a missing or numeric
    field.
    """

    model_config = {"coerce_numbers_to_str": True}


class DocumentParams(SmartBillModel):
    """Identifies one issued document (invoice, estimate or receipt)"""

    company_vat_code: str = Field(..., description="Company VAT code (CIF)")
    series_name: str = Field(..., description="Document series name")
    number: str = Field(..., description="Document number within the series")

    def to_query(self) -> Dict[str, str]:
        """Query parameters used by the document endpoints"""
        return {
            "cif": self.company_vat_code,
            "seriesname": self.series_name,
            "number": self.number,
        }


class Client(SmartBillModel):
    """Client (customer) information"""

    name: str = Field(..., description="Client name")
    vat_code: Optional[str] = Field(None, description="Client VAT code")
    code: Optional[str] = Field(None, description="Client code")
    address: Optional[str] = None
    reg_com: Optional[str] = Field(None, description="Trade register number")
    is_tax_payer: Optional[bool] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    country: str = Field(..., description="Client country")
    email: Optional[str] = None
    bank: Optional[str] = None
    iban: Optional[str] = None
    save_to_db: Optional[bool] = Field(None, description="Save client to SmartBill nomenclature")


class Product(SmartBillModel):
    """Product line for invoices and estimates, including discount lines"""

    name: str = Field(..., description="Product name")
    code: Optional[str] = Field(None, description="Product code")
    product_description: Optional[str] = None
    translated_name: Optional[str] = None
    translated_measuring_unit: Optional[str] = None
    is_discount: bool = Field(False, description="Line is a discount")
    measuring_unit_name: str = Field(..., description="Measuring unit, e.g. 'buc'")
    currency: str = Field(..., description="Currency code")
    quantity: Optional[float] = None
    price: Optional[float] = None
    is_tax_included: Optional[bool] = None
    tax_name: Optional[str] = None
    tax_percentage: Optional[float] = None
    exchange_rate: Optional[float] = None
    save_to_db: Optional[bool] = None
    warehouse_name: Optional[str] = None
    is_service: Optional[bool] = None
    number_of_items: Optional[int] = Field(None, description="Lines covered by a discount")
    discount_type: Optional[int] = Field(None, description="1=value, 2=percentage")
    discount_value: Optional[float] = None
    discount_percentage: Optional[float] = None


class Payment(SmartBillModel):
    """Payment collected together with an invoice"""

    value: float = Field(..., description="Payment amount")
    payment_series: Optional[str] = None
    type: PaymentType = Field(..., description="Payment type")
    is_cash: Optional[bool] = None


class DocumentReference(SmartBillRecord):
    """Series and number of an issued document, as returned by the API"""

    series: Optional[str] = None
    number: Optional[str] = None
