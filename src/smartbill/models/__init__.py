"""Models module initialization"""

from smartbill.models.common import (
    Client,
    DocumentParams,
    DocumentReference,
    Payment,
    PaymentType,
    Product,
    SmartBillModel,
    SmartBillRecord,
)
from smartbill.models.estimate import CreateEstimateParams, EstimateInvoices
from smartbill.models.invoice import (
    CreateInvoiceFromEstimateParams,
    CreateInvoiceParams,
    DocumentCreated,
    EstimateReference,
    PaymentStatus,
    ReverseInvoiceParams,
    ReversedDocument,
    SendToEmailParams,
)
from smartbill.models.payment import (
    CreatePaymentParams,
    DeletePaymentByDetails,
    DeletePaymentByInvoice,
    DeletePaymentParams,
    InvoiceReference,
    NonReceiptPaymentType,
    ReceiptParams,
)
from smartbill.models.response import ApiResponse
from smartbill.models.series import GetSeriesParams, Series, SeriesType
from smartbill.models.stock import GetStockParams, StockProduct, Warehouse
from smartbill.models.tax import Tax

__all__ = [
    "ApiResponse",
    "SmartBillModel",
    "SmartBillRecord",
    "Client",
    "DocumentParams",
    "DocumentReference",
    "Payment",
    "PaymentType",
    "Product",
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
    "NonReceiptPaymentType",
    "GetSeriesParams",
    "Series",
    "SeriesType",
    "GetStockParams",
    "StockProduct",
    "Warehouse",
    "Tax",
]
