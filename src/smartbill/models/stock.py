"""Stock models"""

from typing import List, Optional
from pydantic import Field

from smartbill.models.common import SmartBillModel, SmartBillRecord


class GetStockParams(SmartBillModel):
    """Stock lookup parameters; empty filters are not sent"""

    company_vat_code: str
    date: Optional[str] = Field(None, description="Stock date (YYYY-MM-DD)")
    warehouse_name: Optional[str] = None
    product_name: Optional[str] = None
    product_code: Optional[str] = None


class StockProduct(SmartBillRecord):
    """Product quantity held in a warehouse"""

    measuring_unit: Optional[str] = None
    product_code: Optional[str] = None
    product_name: Optional[str] = None
    quantity: Optional[float] = None


class Warehouse(SmartBillRecord):
    """Warehouse with its stock"""

    warehouse_name: Optional[str] = None
    warehouse_type: Optional[str] = None
    products: Optional[List[StockProduct]] = Field(default_factory=list)
