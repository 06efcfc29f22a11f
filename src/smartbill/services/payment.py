"""Payment operations"""

from typing import Dict

from smartbill.client.http_client import HttpClient, HttpMethod, RequestOptions
from smartbill.client.response_normalizer import RequestKind
from smartbill.models import (
    ApiResponse,
    CreatePaymentParams,
    DeletePaymentByDetails,
    DeletePaymentByInvoice,
    DeletePaymentParams,
    DocumentParams,
    ReceiptParams,
)


def delete_payment_query(params: DeletePaymentParams) -> Dict[str, str]:
    """Query parameters for /payment/v2, taken only from the given variant"""
    if isinstance(params, DeletePaymentByInvoice):
        variant = {
            "invoiceSeries": params.invoice_series,
            "invoiceNumber": params.invoice_number,
        }
    elif isinstance(params, DeletePaymentByDetails):
        variant = {
            "paymentDate": params.payment_date,
            "paymentValue": params.payment_value,
            "clientName": params.client_name,
            "clientCif": params.client_cif,
        }
    else:
        raise TypeError(
            f"Unsupported payment deletion parameters: {type(params).__name__}"
        )

    return {
        "companyVatCode": params.company_vat_code,
        "paymentType": params.payment_type,
        **variant,
    }


class PaymentService:
    """Payment operations"""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(self, params: CreatePaymentParams) -> ApiResponse[None]:
        """Register a payment"""
        return self._http.execute(
            "/payment",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.POST, body=params.to_payload()),
        )

    def get_receipt(self, params: ReceiptParams) -> ApiResponse[None]:
        """
        Get the text of a receipt

        The API returns the receipt text, base64-encoded, in the message.
        """
        return self._http.execute(
            "/payment/text",
            RequestKind.VOID,
            RequestOptions(params={"cif": params.cif, "id": params.id}),
        )

    def delete_receipt(self, params: DocumentParams) -> ApiResponse[None]:
        """Delete a receipt (chitanta)"""
        return self._http.execute(
            "/payment/chitanta",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.DELETE, params=params.to_query()),
        )

    def delete(self, params: DeletePaymentParams) -> ApiResponse[None]:
        """Delete a payment other than a receipt"""
        return self._http.execute(
            "/payment/v2",
            RequestKind.VOID,
            RequestOptions(method=HttpMethod.DELETE, params=delete_payment_query(params)),
        )
