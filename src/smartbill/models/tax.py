"""Tax model"""

from typing import Optional
from pydantic import Field

from smartbill.models.common import SmartBillRecord


class Tax(SmartBillRecord):
    """VAT rate configured on the account"""

    name: Optional[str] = Field(None, description="Tax name")
    percentage: Optional[float] = Field(None, description="Tax percentage")
