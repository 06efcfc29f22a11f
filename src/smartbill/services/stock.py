"""Stock operations"""

from typing import List

from smartbill.client.http_client import HttpClient, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import ApiResponse, GetStockParams, Warehouse


class StockService:
    """Stock operations"""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_stock(self, params: GetStockParams) -> ApiResponse[List[Warehouse]]:
        """List warehouse stock, optionally filtered by date, warehouse or product"""
        query = {"cif": params.company_vat_code}
        filters = (
            ("date", params.date),
            ("warehouseName", params.warehouse_name),
            ("productName", params.product_name),
            ("productCode", params.product_code),
        )
        query.update({key: value for key, value in filters if value})

        return self._http.execute(
            "/stocks",
            RequestKind.STOCK_LIST,
            RequestOptions(params=query),
        )
