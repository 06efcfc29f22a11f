"""Services module initialization"""

from smartbill.services.estimate import EstimateService
from smartbill.services.invoice import InvoiceService
from smartbill.services.payment import PaymentService
from smartbill.services.series import SeriesService
from smartbill.services.stock import StockService
from smartbill.services.tax import TaxService

__all__ = [
    "EstimateService",
    "InvoiceService",
    "PaymentService",
    "SeriesService",
    "StockService",
    "TaxService",
]
