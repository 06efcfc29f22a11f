"""Invoice operations"""

import base64
from typing import Optional, Union

from smartbill.client.http_client import HttpClient, HttpMethod, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import (
    ApiResponse,
    CreateInvoiceFromEstimateParams,
    CreateInvoiceParams,
    DocumentCreated,
    DocumentParams,
    PaymentStatus,
    ReverseInvoiceParams,
    ReversedDocument,
    SendToEmailParams,
)


def encode_text(value: Optional[str]) -> Optional[str]:
    """Base64-encode plain text as UTF-8; empty values stay unset"""
    if not value:
        return None
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


class InvoiceService:
    """
    Invoice operations

    Example:
        >>> result = client.invoice.create(CreateInvoiceParams(
        ...     company_vat_code="RO12345678",
        ...     client=Client(name="Intelligent IT", country="Romania"),
        ...     series_name="FCT",
        ...     products=[Product(
        ...         name="Mapa A4", code="ccd1", measuring_unit_name="buc",
        ...         currency="RON", quantity=2, price=40,
        ...         tax_name="Normala", tax_percentage=19,
        ...     )],
        ... ))
        >>> result.data.series, result.data.number
        ('FCT', '0203')
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(
        self,
        params: Union[CreateInvoiceParams, CreateInvoiceFromEstimateParams],
    ) -> ApiResponse[DocumentCreated]:
        """Create an invoice, either from full details or from an estimate"""
        return self._http.execute(
            "/invoice",
            RequestKind.DOCUMENT_CREATE,
            RequestOptions(method=HttpMethod.POST, body=params.to_payload()),
        )

    def get_pdf(self, params: DocumentParams) -> ApiResponse[bytes]:
        """Download the invoice PDF as raw bytes"""
        return self._http.execute(
            "/invoice/pdf",
            RequestKind.BINARY,
            RequestOptions(
                params=params.to_query(),
                headers={"Accept": "application/octet-stream"},
            ),
        )

    def get_payment_status(self, params: DocumentParams) -> ApiResponse[PaymentStatus]:
        """Get the paid and unpaid amounts of an invoice"""
        return self._http.execute(
            "/invoice/paymentstatus",
            RequestKind.PAYMENT_STATUS,
            RequestOptions(params=params.to_query()),
        )

    def delete(self, params: DocumentParams) -> ApiResponse[None]:
        """Delete an invoice"""
        return self._http.execute(
            "/invoice",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.DELETE, params=params.to_query()),
        )

    def reverse(self, params: ReverseInvoiceParams) -> ApiResponse[ReversedDocument]:
        """Issue a reversal (storno) invoice"""
        return self._http.execute(
            "/invoice/reverse",
            RequestKind.DOCUMENT_REVERSE,
            RequestOptions(method=HttpMethod.POST, body=params.to_payload()),
        )

    def cancel(self, params: DocumentParams) -> ApiResponse[None]:
        """Cancel an invoice"""
        return self._http.execute(
            "/invoice/cancel",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.PUT, params=params.to_query()),
        )

    def restore(self, params: DocumentParams) -> ApiResponse[None]:
        """Restore a cancelled invoice"""
        return self._http.execute(
            "/invoice/restore",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.PUT, params=params.to_query()),
        )

    def send_to_email(self, params: SendToEmailParams) -> ApiResponse[None]:
        """
        Send an invoice or estimate by e-mail

        subject and body_text are given as plain text and sent base64-encoded.
        """
        body = params.to_payload()
        for key, value in (("subject", params.subject), ("bodyText", params.body_text)):
            encoded = encode_text(value)
            if encoded is None:
                body.pop(key, None)
            else:
                body[key] = encoded

        return self._http.execute(
            "/document/send",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.POST, body=body),
        )
