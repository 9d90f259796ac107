"""設定管理モジュール"""

from userlookup.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from userlookup.config.models import (
    DEFAULT_ALLOWED_HOSTS,
    ORIGIN_MATCHING_LEGACY,
    ORIGIN_MATCHING_STRICT,
    AdmissionConfig,
    Config,
    DatabaseConfig,
    DocsConfig,
    LoggingConfig,
    ServerConfig,
)

__all__ = [
    "DEFAULT_ALLOWED_HOSTS",
    "ORIGIN_MATCHING_LEGACY",
    "ORIGIN_MATCHING_STRICT",
    "AdmissionConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "DatabaseConfig",
    "DocsConfig",
    "EnvironmentVariableError",
    "LoggingConfig",
    "ServerConfig",
    "expand_env_vars",
    "load_config",
]
