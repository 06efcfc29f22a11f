"""
SmartBill API SDK for Python

Main entry point for the SDK
"""

from smartbill.client import SmartBillClient
from smartbill.exceptions import (
    SmartBillError,
    SmartBillErrorCategory,
    SmartBillHttpError,
    ValidationError,
    NetworkError,
    ConfigError,
)

# HTTP Client
from smartbill.client import (
    HttpClient,
    HttpMethod,
    RequestOptions,
    HttpAuditEntry,
    RequestKind,
)

# Configuration
from smartbill.config import (
    SmartBillConfig,
    ConfigLoader,
    ConfigValidator,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Services
from smartbill.services import (
    EstimateService,
    InvoiceService,
    PaymentService,
    SeriesService,
    StockService,
    TaxService,
)

# Models
from smartbill.models import (
    ApiResponse,
    Client,
    Product,
    Payment,
    PaymentType,
    DocumentParams,
    DocumentReference,
    CreateInvoiceParams,
    CreateInvoiceFromEstimateParams,
    EstimateReference,
    ReverseInvoiceParams,
    SendToEmailParams,
    DocumentCreated,
    ReversedDocument,
    PaymentStatus,
    CreateEstimateParams,
    EstimateInvoices,
    CreatePaymentParams,
    InvoiceReference,
    ReceiptParams,
    DeletePaymentByInvoice,
    DeletePaymentByDetails,
    DeletePaymentParams,
    GetSeriesParams,
    Series,
    GetStockParams,
    StockProduct,
    Warehouse,
    Tax,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "SmartBillClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "RequestOptions",
    "HttpAuditEntry",
    "RequestKind",
    # Exceptions
    "SmartBillError",
    "SmartBillErrorCategory",
    "SmartBillHttpError",
    "ValidationError",
    "NetworkError",
    "ConfigError",
    # Configuration
    "SmartBillConfig",
    "ConfigLoader",
    "ConfigValidator",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Services
    "EstimateService",
    "InvoiceService",
    "PaymentService",
    "SeriesService",
    "StockService",
    "TaxService",
    # Models
    "ApiResponse",
    "Client",
    "Product",
    "Payment",
    "PaymentType",
    "DocumentParams",
    "DocumentReference",
    "CreateInvoiceParams",
    "CreateInvoiceFromEstimateParams",
    "EstimateReference",
    "ReverseInvoiceParams",
    "SendToEmailParams",
    "DocumentCreated",
    "ReversedDocument",
    "PaymentStatus",
    "CreateEstimateParams",
    "EstimateInvoices",
    "CreatePaymentParams",
    "InvoiceReference",
    "ReceiptParams",
    "DeletePaymentByInvoice",
    "DeletePaymentByDetails",
    "DeletePaymentParams",
    "GetSeriesParams",
    "Series",
    "GetStockParams",
    "StockProduct",
    "Warehouse",
    "Tax",
]
