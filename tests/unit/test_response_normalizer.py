"""
Response Normalizer Unit Tests
"""

import pytest

from smartbill.client.response_normalizer import (
    DECODERS,
    RequestKind,
    decode_response,
    resolve_error_message,
)
from smartbill.models import (
    DocumentCreated,
    DocumentReference,
    EstimateInvoices,
    PaymentStatus,
    ReversedDocument,
    Series,
    Tax,
    Warehouse,
)


class TestDecodeResponse:
    """Tests for decode_response"""

    def test_every_kind_has_a_decoder(self):
        """Should cover every request kind"""
        assert set(DECODERS) == set(RequestKind)

    def test_document_create_drops_unknown_fields(self, make_response):
        """Should keep only series and number"""
        response = make_response(
            json_body={"series": "FCT", "number": "0203", "extra": "ignored"}
        )

        data, message = decode_response(RequestKind.DOCUMENT_CREATE, response)

        assert data == DocumentCreated(series="FCT", number="0203")
        assert data.model_dump() == {"series": "FCT", "number": "0203"}
        assert message is None

    def test_document_reverse(self, make_response):
        """Should map the reversal document fields"""
        response = make_response(json_body={
            "series": "FCT",
            "number": "0204",
            "documentUrl": "https://cloud.smartbill.ro/doc/1",
            "documentId": "991",
            "documentViewUrl": "https://cloud.smartbill.ro/view/1",
            "errorText": "",
        })

        data, _ = decode_response(RequestKind.DOCUMENT_REVERSE, response)

        assert data == ReversedDocument(
            series="FCT",
            number="0204",
            document_url="https://cloud.smartbill.ro/doc/1",
            document_id="991",
            document_view_url="https://cloud.smartbill.ro/view/1",
        )

    def test_binary_returns_raw_bytes(self, make_response):
        """Should return the body untouched"""
        pdf = b"%PDF-1.4\n\x00\x01binary"
        response = make_response(
            content=pdf, headers={"Content-Type": "application/octet-stream"}
        )

        data, message = decode_response(RequestKind.BINARY, response)

        assert data == pdf
        assert message is None

    def test_tax_list_unwraps_taxes(self, make_response):
        """Should unwrap the taxes array"""
        response = make_response(json_body={
            "errorText": "",
            "taxes": [
                {"name": "Normala", "percentage": 19},
                {"name": "Redusa", "percentage": 9},
            ],
        })

        data, _ = decode_response(RequestKind.TAX_LIST, response)

        assert data == [
            Tax(name="Normala", percentage=19),
            Tax(name="Redusa", percentage=9),
        ]

    def test_series_list_unwraps_list(self, make_response):
        """Should unwrap the list array into series"""
        response = make_response(
            json_body={"list": [{"name": "FCT", "nextNumber": 7, "type": "f"}]}
        )

        data, _ = decode_response(RequestKind.SERIES_LIST, response)

        assert data == [Series(name="FCT", next_number=7, type="f")]

    def test_stock_list_unwraps_list(self, make_response):
        """Should unwrap the list array into warehouses"""
        response = make_response(json_body={"list": [{
            "warehouseName": "Depozit central",
            "warehouseType": "Marfa",
            "products": [{
                "measuringUnit": "buc",
                "productCode": "ccd1",
                "productName": "Mapa A4",
                "quantity": 12,
            }],
        }]})

        data, _ = decode_response(RequestKind.STOCK_LIST, response)

        assert len(data) == 1
        assert isinstance(data[0], Warehouse)
        assert data[0].warehouse_name == "Depozit central"
        assert data[0].products[0].product_code == "ccd1"
        assert data[0].products[0].quantity == 12

    def test_null_list_is_empty(self, make_response):
        """Should treat a null list as no results"""
        response = make_response(json_body={"list": None})

        data, _ = decode_response(RequestKind.SERIES_LIST, response)

        assert data == []

    def test_missing_wrapper_key_raises(self, make_response):
        """Should reject a body without the wrapper key"""
        response = make_response(json_body={"taxes": []})

        with pytest.raises(ValueError, match="'list'"):
            decode_response(RequestKind.STOCK_LIST, response)

    def test_payment_status(self, make_response):
        """Should keep the four payment status fields"""
        response = make_response(json_body={
            "invoiceTotalAmount": 119.0,
            "paidAmount": 100.0,
            "unpaidAmount": 19.0,
            "paid": False,
            "number": "0203",
        })

        data, _ = decode_response(RequestKind.PAYMENT_STATUS, response)

        assert data == PaymentStatus(
            invoice_total_amount=119.0,
            paid_amount=100.0,
            unpaid_amount=19.0,
            paid=False,
        )

    def test_estimate_invoices(self, make_response):
        """Should map the linked invoices"""
        response = make_response(json_body={
            "areInvoicesCreated": True,
            "invoices": [{"series": "FCT", "number": "0203"}],
            "message": "",
        })

        data, _ = decode_response(RequestKind.ESTIMATE_INVOICES, response)

        assert data == EstimateInvoices(
            are_invoices_created=True,
            invoices=[DocumentReference(series="FCT", number="0203")],
        )

    def test_void_passes_message_through(self, make_response):
        """Should return no payload and the API message"""
        response = make_response(json_body={"errorText": "", "message": "Factura a fost stearsa"})

        data, message = decode_response(RequestKind.VOID, response)

        assert data is None
        assert message == "Factura a fost stearsa"

    def test_void_non_string_message(self, make_response):
        """Should convert a non-text message to a string"""
        response = make_response(json_body={"message": 42})

        data, message = decode_response(RequestKind.VOID, response)

        assert data is None
        assert message == "42"

    def test_void_empty_body(self, make_response):
        """Should accept an empty body"""
        data, message = decode_response(RequestKind.VOID, make_response(content=b""))

        assert data is None
        assert message is None

    def test_malformed_json_raises(self, make_response):
        """Should raise ValueError for malformed JSON"""
        response = make_response(content=b"{not json")

        with pytest.raises(ValueError):
            decode_response(RequestKind.DOCUMENT_CREATE, response)

    def test_non_object_body_raises(self, make_response):
        """Should reject JSON that is not an object"""
        response = make_response(json_body=["FCT", "0203"])

        with pytest.raises(ValueError, match="JSON object"):
            decode_response(RequestKind.PAYMENT_STATUS, response)


class TestResolveErrorMessage:
    """Tests for resolve_error_message"""

    def test_error_text_wins_over_message(self, make_response):
        """Should prefer errorText when both are present"""
        response = make_response(status=400, json_body={"errorText": "A", "message": "B"})
        assert resolve_error_message(response) == "A"

    def test_message_when_error_text_empty(self, make_response):
        """Should fall back to message"""
        response = make_response(status=400, json_body={"errorText": "", "message": "B"})
        assert resolve_error_message(response) == "B"

    def test_synthesized_when_no_fields(self, make_response):
        """Should synthesize a status line"""
        response = make_response(status=404, json_body={})
        assert resolve_error_message(response) == "HTTP error 404: Not Found"

    def test_synthesized_when_body_unparseable(self, make_response):
        """Should synthesize a status line for a non-JSON body"""
        response = make_response(
            status=502,
            content=b"<html>Bad Gateway</html>",
            headers={"Content-Type": "text/html"},
        )
        assert resolve_error_message(response) == "HTTP error 502: Bad Gateway"
