"""
SmartBill API client
Main entry point: one configuration, one HTTP session, six resource services
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from smartbill.client.http_client import HttpClient
from smartbill.config import ConfigLoader, SmartBillConfig
from smartbill.services.estimate import EstimateService
from smartbill.services.invoice import InvoiceService
from smartbill.services.payment import PaymentService
from smartbill.services.series import SeriesService
from smartbill.services.stock import StockService
from smartbill.services.tax import TaxService


logger = logging.getLogger(__name__)


class SmartBillClient:
    """
    SmartBill API client

    Every service shares the same HttpClient, and with it the same
    immutable configuration.

    Example:
        >>> client = SmartBillClient({"username": "you@example.com", "token": "..."})
        >>> taxes = client.tax.get_tax_types("RO12345678")
        >>> if taxes.success:
        ...     print([tax.name for tax in taxes.data])
    """

    def __init__(
        self,
        config: Union[SmartBillConfig, Dict[str, Any]],
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            config: Resolved configuration, or a dictionary to resolve
            session: Optional pre-built requests session
        """
        if not isinstance(config, SmartBillConfig):
            config = ConfigLoader().resolve(dict(config))

        self.config = config
        self.http = HttpClient(config, session=session)

        self.invoice = InvoiceService(self.http)
        self.payment = PaymentService(self.http)
        self.estimate = EstimateService(self.http)
        self.tax = TaxService(self.http)
        self.series = SeriesService(self.http)
        self.stock = StockService(self.http)

        logger.debug("SmartBill client created for %s", config.base_url)

    @classmethod
    def from_env(
        cls,
        file: Optional[Union[str, Path]] = None,
        **overrides: Any,
    ) -> "SmartBillClient":
        """
        Build a client from SMARTBILL_* environment variables

        Args:
            file: Optional JSON configuration file, overridden by the environment
            overrides: Values that take priority over file and environment
        """
        return cls(ConfigLoader().load(file=file, env=True, config=overrides))

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.http.close()

    def __enter__(self) -> "SmartBillClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
