"""
Client module for the SmartBill SDK
"""

from smartbill.client.http_client import (
    HttpClient,
    HttpMethod,
    RequestOptions,
    HttpAuditEntry,
)
from smartbill.client.response_normalizer import (
    RequestKind,
    decode_response,
    resolve_error_message,
)
from smartbill.client.smartbill_client import SmartBillClient

__all__ = [
    "SmartBillClient",
    "HttpClient",
    "HttpMethod",
    "RequestOptions",
    "HttpAuditEntry",
    "RequestKind",
    "decode_response",
    "resolve_error_message",
]
