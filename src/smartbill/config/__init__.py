"""
Configuration module
"""

from smartbill.config.smartbill_config import (
    SmartBillConfig,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from smartbill.config.config_loader import ConfigLoader
from smartbill.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "SmartBillConfig",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
