"""
Response normalization for SmartBill API calls

Maps a request kind to a pure function that turns a successful
requests.Response into a typed payload, and resolves error messages
for non-2xx responses.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

import requests
from pydantic import TypeAdapter

from smartbill.models import (
    DocumentCreated,
    EstimateInvoices,
    PaymentStatus,
    ReversedDocument,
    Series,
    SmartBillModel,
    Tax,
    Warehouse,
)


class RequestKind(str, Enum):
    """Selects how a response body is decoded"""
    DOCUMENT_CREATE = "document_create"
    DOCUMENT_REVERSE = "document_reverse"
    BINARY = "binary"
    TAX_LIST = "tax_list"
    SERIES_LIST = "series_list"
    STOCK_LIST = "stock_list"
    PAYMENT_STATUS = "payment_status"
    ESTIMATE_INVOICES = "estimate_invoices"
    VOID = "void"


# (payload, message)
Decoded = Tuple[Any, Optional[str]]
Decoder = Callable[[requests.Response], Decoded]


def _json_object(response: requests.Response) -> Dict[str, Any]:
    body = response.json()
    if not isinstance(body, dict):
        raise ValueError(
            f"Expected a JSON object in response, got {type(body).__name__}"
        )
    return body


def _model_decoder(model: Type[SmartBillModel]) -> Decoder:
    def decode(response: requests.Response) -> Decoded:
        return model.model_validate(_json_object(response)), None
    return decode


def _list_decoder(key: str, model: Type[SmartBillModel]) -> Decoder:
    adapter = TypeAdapter(List[model])

    def decode(response: requests.Response) -> Decoded:
        body = _json_object(response)
        if key not in body:
            raise ValueError(f"Response is missing the '{key}' field")
        # null list means nothing matched
        return adapter.validate_python(body[key] or []), None
    return decode


def _decode_binary(response: requests.Response) -> Decoded:
    return response.content, None


def _decode_void(response: requests.Response) -> Decoded:
    if not response.content:
        return None, None
    message = _json_object(response).get("message")
    return None, str(message) if message is not None else None


DECODERS: Dict[RequestKind, Decoder] = {
    RequestKind.DOCUMENT_CREATE: _model_decoder(DocumentCreated),
    RequestKind.DOCUMENT_REVERSE: _model_decoder(ReversedDocument),
    RequestKind.BINARY: _decode_binary,
    RequestKind.TAX_LIST: _list_decoder("taxes", Tax),
    RequestKind.SERIES_LIST: _list_decoder("list", Series),
    RequestKind.STOCK_LIST: _list_decoder("list", Warehouse),
    RequestKind.PAYMENT_STATUS: _model_decoder(PaymentStatus),
    RequestKind.ESTIMATE_INVOICES: _model_decoder(EstimateInvoices),
    RequestKind.VOID: _decode_void,
}


def decode_response(kind: RequestKind, response: requests.Response) -> Decoded:
    """
    Decode a 2xx response according to its request kind

    Args:
        kind: Request kind selected by the calling service
        response: Successful HTTP response

    Returns:
        Tuple of (payload, message). Only VOID responses carry a message.

    Raises:
        ValueError: If the body cannot be decoded into the expected shape
    """
    return DECODERS[kind](response)


def resolve_error_message(response: requests.Response) -> str:
    """
    Resolve the message for a non-2xx response

    Precedence: errorText, then message, then a synthesized status line.
    """
    fallback = f"HTTP error {response.status_code}: {response.reason or ''}"

    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback

    message = body.get("errorText") or body.get("message")
    return str(message) if message else fallback
