"""
Estimate Service Unit Tests
"""

import pytest

from smartbill import SmartBillClient
from smartbill.models import (
    Client,
    CreateEstimateParams,
    DocumentCreated,
    DocumentParams,
    DocumentReference,
    Product,
)


@pytest.fixture
def estimate() -> DocumentParams:
    return DocumentParams(company_vat_code="RO12345678", series_name="PFCT", number="0007")


class TestEstimateService:
    """Tests for EstimateService"""

    def test_create(self, client: SmartBillClient, transport):
        """Should POST the estimate and return its series and number"""
        transport.reply(json_body={"series": "PFCT", "number": "0008", "errorText": ""})

        result = client.estimate.create(CreateEstimateParams(
            company_vat_code="RO12345678",
            client=Client(name="Client SRL", country="Romania"),
            series_name="PFCT",
            products=[Product(
                name="Consultanta",
                measuring_unit_name="ora",
                currency="RON",
                quantity=3,
                price=150,
                is_service=True,
            )],
        ))

        assert transport.last.method == "POST"
        assert transport.last_path() == "/SBORO/api/estimate"
        body = transport.last_json()
        assert body["seriesName"] == "PFCT"
        assert body["products"][0]["isService"] is True
        assert result.data == DocumentCreated(series="PFCT", number="0008")

    def test_get_invoices(self, client: SmartBillClient, transport, estimate: DocumentParams):
        """Should return the invoices issued from the estimate"""
        transport.reply(json_body={
            "areInvoicesCreated": True,
            "invoices": [
                {"series": "FCT", "number": "0203"},
                {"series": "FCT", "number": "0204"},
            ],
        })

        result = client.estimate.get_invoices(estimate)

        assert transport.last_path() == "/SBORO/api/estimate/invoices"
        assert transport.last_query() == {"cif": "RO12345678", "seriesname": "PFCT", "number": "0007"}
        assert result.data.are_invoices_created is True
        assert result.data.invoices == [
            DocumentReference(series="FCT", number="0203"),
            DocumentReference(series="FCT", number="0204"),
        ]

    def test_get_pdf(self, client: SmartBillClient, transport, estimate: DocumentParams):
        """Should download the estimate PDF"""
        transport.reply(content=b"%PDF-proforma", headers={"Content-Type": "application/octet-stream"})

        result = client.estimate.get_pdf(estimate)

        assert transport.last_path() == "/SBORO/api/estimate/pdf"
        assert transport.last.headers["Accept"] == "application/octet-stream"
        assert result.data == b"%PDF-proforma"

    @pytest.mark.parametrize(
        "operation, method, path",
        [
            ("delete", "DELETE", "/SBORO/api/estimate"),
            ("cancel", "PUT", "/SBORO/api/estimate/cancel"),
            ("restore", "PUT", "/SBORO/api/estimate/restore"),
        ],
    )
    def test_state_changes(
        self, client: SmartBillClient, transport, estimate: DocumentParams,
        operation: str, method: str, path: str,
    ):
        """Should target the endpoint with the document query"""
        transport.reply(json_body={"message": "OK"})

        result = getattr(client.estimate, operation)(estimate)

        assert transport.last.method == method
        assert transport.last_path() == path
        assert transport.last_query()["seriesname"] == "PFCT"
        assert result.success is True
        assert result.message == "OK"

    def test_failure_is_returned_not_raised(self, client: SmartBillClient, transport, estimate):
        """Should return a failure envelope for vendor errors"""
        transport.reply(status=404, json_body={"errorText": "Proforma nu a fost gasita"})

        result = client.estimate.delete(estimate)

        assert result.success is False
        assert result.message == "Proforma nu a fost gasita"
