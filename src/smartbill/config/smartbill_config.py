"""
SmartBill Configuration Types and Schema
Type-safe configuration objects for the SmartBill SDK
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_URL = "https://ws.smartbill.ro/SBORO/api"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = DEFAULT_BASE_URL
    TIMEOUT = None
    ENABLE_AUDIT_LOG = True


# Environment variable mapping
ENV_VAR_MAPPING = {
    "SMARTBILL_USERNAME": "username",
    "SMARTBILL_TOKEN": "token",
    "SMARTBILL_BASE_URL": "base_url",
    "SMARTBILL_TIMEOUT": "timeout",
    "SMARTBILL_ENABLE_AUDIT_LOG": "enable_audit_log",
}


class SmartBillConfig(BaseModel):
    """
    Main SmartBill Configuration class

    Immutable once built; the client shares one instance with every
    resource service.
    """

    # Required - Credentials
    username: str = Field(
        ...,
        description="SmartBill account username (e-mail)",
        min_length=1
    )
    token: str = Field(
        ...,
        description="API token from SmartBill Cloud > Contul meu > Integrari",
        min_length=1
    )

    # Optional - Transport settings
    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        description="API base URL, used verbatim"
    )
    timeout: Optional[int] = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds (None waits indefinitely)",
        ge=1,
        le=300000
    )

    # Optional - Audit logging
    enable_audit_log: bool = Field(
        default=ConfigDefaults.ENABLE_AUDIT_LOG,
        description="Enable audit logging"
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("username", "token", mode="before")
    @classmethod
    def strip_credentials(cls, v: Any) -> Any:
        """Strip surrounding whitespace from credentials"""
        return v.strip() if isinstance(v, str) else v

    @field_validator("base_url", mode="before")
    @classmethod
    def default_base_url(cls, v: Any) -> Any:
        """Fall back to the public API when no base_url is given"""
        return v or ConfigDefaults.BASE_URL

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base_url is a valid URL; it is otherwise kept verbatim"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v

    def get_timeout_seconds(self, override: Optional[int] = None) -> Optional[float]:
        """Resolve a timeout in milliseconds to seconds for requests"""
        timeout = override if override is not None else self.timeout
        if timeout is None:
            return None
        return timeout / 1000.0

