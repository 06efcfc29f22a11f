"""
Configuration and Usage Examples for the SmartBill SDK
Demonstrates the ways to configure a client and handle results
"""

import logging
from pathlib import Path

from smartbill import (
    ConfigLoader,
    ConfigValidator,
    DeletePaymentByInvoice,
    DocumentParams,
    SmartBillClient,
    SmartBillConfig,
)


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> SmartBillConfig:
    """Configure the SDK programmatically"""
    return ConfigLoader().load(
        env=False,
        config={
            "username": "office@example.ro",
            "token": "your-api-token",
            "timeout": 30000,
            "enable_audit_log": True,
        },
    )


# =============================================================================
# Example 2: File and Environment Configuration
# =============================================================================

def file_and_env_config_example() -> SmartBillConfig:
    """
    Load from a JSON file, then let SMARTBILL_* environment variables override it

        export SMARTBILL_USERNAME=office@example.ro
        export SMARTBILL_TOKEN=your-api-token
    """
    loader = ConfigLoader()
    config_path = Path("./config/smartbill.json")

    if not config_path.exists():
        loader.create_template(config_path)
        print(f"Template written to {config_path}, fill it in and run again")

    return loader.load(file=config_path)


# =============================================================================
# Example 3: Validating Before Use
# =============================================================================

def validation_example() -> None:
    """Check a configuration dictionary without building a client"""
    result = ConfigValidator().validate({"username": "office@example.ro", "timeout": 0})

    if not result.valid:
        for error in result.errors:
            print(f"{error.field}: {error.message}")


# =============================================================================
# Example 4: Calling the API
# =============================================================================

def usage_example(config: SmartBillConfig) -> None:
    """Download an invoice and delete its card payment"""
    invoice = DocumentParams(
        company_vat_code="RO12345678", series_name="FCT", number="0203"
    )

    with SmartBillClient(config) as client:
        client.http.set_audit_log_callback(
            lambda entry: print(f"{entry.method} {entry.url} -> {entry.status_code}")
        )

        pdf = client.invoice.get_pdf(invoice)
        if pdf.success:
            Path("FCT-0203.pdf").write_bytes(pdf.data)
        else:
            print(f"Could not download invoice: {pdf.message}")

        deleted = client.payment.delete(DeletePaymentByInvoice(
            company_vat_code="RO12345678",
            payment_type="Card",
            invoice_series="FCT",
            invoice_number="0203",
        ))
        print(deleted.message)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    validation_example()
    usage_example(programmatic_config_example())
