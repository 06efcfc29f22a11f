"""
SmartBill Client Unit Tests
"""

import pytest

from smartbill import (
    DEFAULT_BASE_URL,
    EstimateService,
    InvoiceService,
    PaymentService,
    SeriesService,
    SmartBillClient,
    SmartBillConfig,
    StockService,
    TaxService,
    ValidationError,
)


class TestSmartBillClient:
    """Tests for SmartBillClient"""

    def test_exposes_all_services(self, client: SmartBillClient):
        """Should expose the six resource services"""
        assert isinstance(client.invoice, InvoiceService)
        assert isinstance(client.estimate, EstimateService)
        assert isinstance(client.payment, PaymentService)
        assert isinstance(client.tax, TaxService)
        assert isinstance(client.series, SeriesService)
        assert isinstance(client.stock, StockService)

    def test_services_share_one_http_client(self, client: SmartBillClient):
        """Should inject the same executor into every service"""
        services = [
            client.invoice, client.estimate, client.payment,
            client.tax, client.series, client.stock,
        ]
        assert all(service._http is client.http for service in services)
        assert client.http.config is client.config

    def test_accepts_dict_config(self, transport):
        """Should resolve a plain dictionary into a config"""
        with SmartBillClient({"username": "office@example.ro", "token": "t"}) as client:
            client.tax.get_tax_types("RO12345678")

        assert client.config.base_url == DEFAULT_BASE_URL
        assert transport.last.url.startswith(DEFAULT_BASE_URL)

    @pytest.mark.parametrize("base_url", [None, ""])
    def test_missing_base_url_uses_default(self, transport, base_url):
        """Should fall back to the public API for a None or empty base_url"""
        with SmartBillClient(
            {"username": "office@example.ro", "token": "t", "base_url": base_url}
        ) as client:
            client.tax.get_tax_types("RO12345678")

        assert client.config.base_url == DEFAULT_BASE_URL
        assert transport.last.url.startswith(DEFAULT_BASE_URL)

    def test_rejects_invalid_dict_config(self):
        """Should raise for missing credentials"""
        with pytest.raises(ValidationError):
            SmartBillClient({"username": "office@example.ro"})

    def test_custom_base_url(self, transport):
        """Should call the supplied base URL"""
        config = SmartBillConfig(
            username="u", token="t", base_url="https://sandbox.example.com/SBORO/api"
        )
        with SmartBillClient(config) as client:
            client.tax.get_tax_types("RO1")

        assert transport.last.url == "https://sandbox.example.com/SBORO/api/tax?cif=RO1"

    def test_base_url_kept_verbatim(self):
        """Should not trim the supplied base URL"""
        config = SmartBillConfig(
            username=" u ", token="t", base_url="https://sandbox.example.com/api "
        )

        assert config.base_url == "https://sandbox.example.com/api "
        assert config.username == "u"

    def test_from_env(self, transport, monkeypatch):
        """Should build the config from SMARTBILL_* variables"""
        monkeypatch.setenv("SMARTBILL_USERNAME", "env@example.ro")
        monkeypatch.setenv("SMARTBILL_TOKEN", "env-token")
        monkeypatch.setenv("SMARTBILL_TIMEOUT", "5000")

        with SmartBillClient.from_env() as client:
            assert client.config.username == "env@example.ro"
            assert client.config.timeout == 5000

    def test_from_env_overrides(self, transport, monkeypatch):
        """Should let keyword overrides win over the environment"""
        monkeypatch.setenv("SMARTBILL_USERNAME", "env@example.ro")
        monkeypatch.setenv("SMARTBILL_TOKEN", "env-token")

        with SmartBillClient.from_env(token="override") as client:
            assert client.config.token == "override"
