"""Estimate (proforma) operations"""

from smartbill.client.http_client import HttpClient, HttpMethod, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import (
    ApiResponse,
    CreateEstimateParams,
    DocumentCreated,
    DocumentParams,
    EstimateInvoices,
)


class EstimateService:
    """Estimate operations"""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(self, params: CreateEstimateParams) -> ApiResponse[DocumentCreated]:
        """Create an estimate"""
        return self._http.execute(
            "/estimate",
            RequestKind.DOCUMENT_CREATE,
            RequestOptions(method=HttpMethod.POST, body=params.to_payload()),
        )

    def get_pdf(self, params: DocumentParams) -> ApiResponse[bytes]:
        """Download the estimate PDF as raw bytes"""
        return self._http.execute(
            "/estimate/pdf",
            RequestKind.BINARY,
            RequestOptions(
                params=params.to_query(),
                headers={"Accept": "application/octet-stream"},
            ),
        )

    def get_invoices(self, params: DocumentParams) -> ApiResponse[EstimateInvoices]:
        """Get the invoices issued from an estimate"""
        return self._http.execute(
            "/estimate/invoices",
            RequestKind.ESTIMATE_INVOICES,
            RequestOptions(params=params.to_query()),
        )

    def delete(self, params: DocumentParams) -> ApiResponse[None]:
        """Delete an estimate"""
        return self._http.execute(
            "/estimate",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.DELETE, params=params.to_query()),
        )

    def cancel(self, params: DocumentParams) -> ApiResponse[None]:
        """Cancel an estimate"""
        return self._http.execute(
            "/estimate/cancel",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.PUT, params=params.to_query()),
        )

    def restore(self, params: DocumentParams) -> ApiResponse[None]:
        """Restore a cancelled estimate"""
        return self._http.execute(
            "/estimate/restore",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.PUT, params=params.to_query()),
        )
