"""Document series models"""

from typing import Literal, Optional, Union
from pydantic import Field

from smartbill.models.common import SmartBillModel, SmartBillRecord


# f=invoice, p=estimate, c=receipt
SeriesType = Literal["f", "p", "c"]


class GetSeriesParams(SmartBillModel):
    """Series lookup parameters"""

    company_vat_code: str
    type: SeriesType


class Series(SmartBillRecord):
    """Document series configured on the account"""

    name: Optional[str] = Field(None, description="Series name")
    next_number: Optional[Union[int, str]] = Field(None, description="Next number to be issued")
    type: Optional[str] = Field(None, description="Document type: f, p or c")
