"""
HTTP transport layer for the SmartBill API
Handles authenticated requests, response normalization and audit logging.
One outbound request per call: no retries, no caching.
"""

import base64
import time
import uuid
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Optional,
)

import requests
from requests.adapters import HTTPAdapter

from smartbill.client.response_normalizer import (
    RequestKind,
    decode_response,
    resolve_error_message,
)
from smartbill.config.smartbill_config import SmartBillConfig
from smartbill.exceptions import NetworkError, SmartBillError, SmartBillHttpError
from smartbill.models.response import ApiResponse


# Logger for this module
logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class RequestOptions:
    """Per-call request options"""
    method: HttpMethod = HttpMethod.GET
    headers: Optional[Dict[str, str]] = None
    params: Optional[Dict[str, str]] = None
    body: Optional[Any] = None
    timeout: Optional[int] = None  # milliseconds, overrides config


@dataclass
class HttpAuditEntry:
    """Audit log entry for HTTP requests"""
    timestamp: str
    request_id: str
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Any] = None
    status_code: Optional[int] = None
    duration: int = 0
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "token",
    "password",
]


class HttpClient:
    """
    HTTP Client for the SmartBill API

    Features:
    - Basic authentication from the configured username and token
    - Request-kind driven response decoding into typed payloads
    - Failure envelopes instead of exceptions from execute()
    - Audit logging with credential redaction
    - Connection keep-alive via session pooling

    Example:
        >>> config = SmartBillConfig(username="you@example.com", token="...")
        >>> client = HttpClient(config)
        >>> result = client.execute("/tax?cif=RO12345678", RequestKind.TAX_LIST)
        >>> print(result.data)
    """

    def __init__(
        self,
        config: SmartBillConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Resolved SmartBill configuration
            session: Optional pre-built requests session
        """
        self.config = config

        # Audit logging callback
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None

        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"sb-{timestamp}-{unique_id}"

    def _auth_header(self) -> str:
        """Basic authorization header value"""
        credentials = f"{self.config.username}:{self.config.token}"
        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    def _build_headers(self, extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Default headers; caller-supplied headers win"""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": self._auth_header(),
        }
        if extra:
            headers.update(extra)
        return headers

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                is_sensitive = any(
                    field in lower_key for field in SENSITIVE_FIELDS
                )

                if is_sensitive:
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (dict, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _normalize_error(self, error: Exception) -> SmartBillError:
        """Normalize transport exceptions into SDK errors"""
        if isinstance(error, requests.exceptions.Timeout):
            return NetworkError.timeout(f"Request timed out: {error}", cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return NetworkError.connection_error(
                f"Connection error: {error}", cause=error
            )

        if isinstance(error, requests.exceptions.RequestException):
            return NetworkError(f"Request error: {error}", cause=error)

        if isinstance(error, SmartBillError):
            return error

        return SmartBillError(str(error) or UNKNOWN_ERROR_MESSAGE, cause=error)

    def _log_audit(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any],
        request_id: str,
        start_time: float,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        """Pass an audit entry to the callback, if one is set"""
        if not (self.config.enable_audit_log and self._audit_log_callback):
            return

        entry = HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            method=method,
            url=url,
            headers=self._redact_sensitive_data(dict(headers)),
            body=self._redact_sensitive_data(body),
            status_code=response.status_code if response is not None else None,
            duration=int((time.time() - start_time) * 1000),
            success=error is None,
            error=str(error) if error else None,
        )
        try:
            self._audit_log_callback(entry)
        except Exception as e:
            logger.warning("Audit log callback failed for %s: %s", request_id, e)

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    def request(
        self,
        endpoint: str,
        options: Optional[RequestOptions] = None,
    ) -> requests.Response:
        """
        Send one authenticated request and return the raw response

        Args:
            endpoint: Path appended to the configured base URL
            options: Optional request options

        Returns:
            The 2xx response

        Raises:
            SmartBillHttpError: If the API answers with a non-2xx status
            NetworkError: If the request could not be completed
        """
        options = options or RequestOptions()
        method = options.method.value
        url = f"{self.config.base_url}{endpoint}"
        headers = self._build_headers(options.headers)
        request_id = self._generate_request_id()
        start_time = time.time()

        logger.debug("SmartBill request %s %s %s", request_id, method, url)

        try:
            prepared = self._session.prepare_request(
                requests.Request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=options.params,
                    json=options.body,
                )
            )
            response = self._session.send(
                prepared,
                timeout=self.config.get_timeout_seconds(options.timeout),
            )
        except Exception as e:
            error = self._normalize_error(e)
            logger.warning("SmartBill request %s failed: %s", request_id, error)
            self._log_audit(
                method, url, headers, options.body, request_id, start_time,
                error=error,
            )
            raise error from e

        if not response.ok:
            http_error = SmartBillHttpError(response)
            logger.warning(
                "SmartBill request %s returned HTTP %s", request_id, response.status_code
            )
            self._log_audit(
                method, url, headers, options.body, request_id, start_time,
                response=response, error=http_error,
            )
            raise http_error

        logger.debug(
            "SmartBill request %s completed with HTTP %s",
            request_id,
            response.status_code,
        )
        self._log_audit(
            method, url, headers, options.body, request_id, start_time,
            response=response,
        )
        return response

    def execute(
        self,
        endpoint: str,
        kind: RequestKind,
        options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Any]:
        """
        Perform one request and normalize its outcome into an envelope

        Never raises: transport failures, non-2xx responses and undecodable
        bodies all produce a failure envelope.

        Args:
            endpoint: Path appended to the configured base URL
            kind: Selects how the response body is decoded
            options: Optional request options

        Returns:
            Success envelope with the decoded payload, or failure envelope
        """
        try:
            response = self.request(endpoint, options)
        except SmartBillHttpError as e:
            return ApiResponse.fail(resolve_error_message(e.response))
        except SmartBillError as e:
            return ApiResponse.fail(str(e) or UNKNOWN_ERROR_MESSAGE)

        try:
            data, message = decode_response(kind, response)
        except Exception as e:
            logger.warning("Could not decode %s response from %s: %s", kind.value, endpoint, e)
            return ApiResponse.fail(str(e) or UNKNOWN_ERROR_MESSAGE)

        return ApiResponse.ok(data, message)

    @property
    def base_url(self) -> str:
        """Get base URL"""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()
