"""Tax operations"""

from typing import List

from smartbill.client.http_client import HttpClient, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import ApiResponse, Tax


class TaxService:
    """Tax operations"""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_tax_types(self, company_vat_code: str) -> ApiResponse[List[Tax]]:
        """List the VAT rates configured for a company"""
        return self._http.execute(
            "/tax",
            RequestKind.TAX_LIST,
            RequestOptions(params={"cif": company_vat_code}),
        )
