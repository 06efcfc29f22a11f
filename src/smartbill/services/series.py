"""Document series operations"""

from typing import List

from smartbill.client.http_client import HttpClient, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import ApiResponse, GetSeriesParams, Series


class SeriesService:
    """Document series operations"""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_series(self, params: GetSeriesParams) -> ApiResponse[List[Series]]:
        """
        List the series defined for a document type

        Args:
            params: Company VAT code and type ('f' invoice, 'p' estimate,
                'c' receipt)
        """
        return self._http.execute(
            "/series",
            RequestKind.SERIES_LIST,
            RequestOptions(params={"cif": params.company_vat_code, "type": params.type}),
        )
