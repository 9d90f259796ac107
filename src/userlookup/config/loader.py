"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from userlookup.config.models import (
    DEFAULT_LOG_FORMAT,
    ORIGIN_MATCHING_MODES,
    ORIGIN_MATCHING_STRICT,
    AdmissionConfig,
    Config,
    DatabaseConfig,
    DocsConfig,
    LoggingConfig,
    ServerConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _parse_port(value: Any) -> int:
    """ポート番号を整数に変換する

    環境変数展開後は文字列になるため、数字文字列も受け付ける。

    Raises:
        ConfigValidationError: 1-65535 の整数でない（0 は空きポート指定として許可）
    """
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(f"Invalid server.port: {value!r}") from None
    if isinstance(value, bool) or not 0 <= port <= 65535:
        raise ConfigValidationError(f"Invalid server.port: {value!r}")
    return port


def _parse_admission(data: dict[str, Any]) -> AdmissionConfig:
    """admission セクションを解析する"""
    admission = AdmissionConfig()

    if "allowed_hosts" in data:
        allowed_hosts = data["allowed_hosts"]
        if not isinstance(allowed_hosts, list) or not allowed_hosts:
            raise ConfigValidationError(
                "admission.allowed_hosts must be a non-empty list"
            )
        admission.allowed_hosts = [str(host).strip() for host in allowed_hosts]

    origin_matching = data.get("origin_matching", ORIGIN_MATCHING_STRICT)
    if origin_matching not in ORIGIN_MATCHING_MODES:
        raise ConfigValidationError(
            f"admission.origin_matching must be one of {ORIGIN_MATCHING_MODES}, "
            f"got {origin_matching!r}"
        )
    admission.origin_matching = origin_matching

    return admission


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落、または値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    if not isinstance(raw_data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # DatabaseConfig (必須)
    database_data = _validate_required_field(data, "database")
    database = DatabaseConfig(
        path=_validate_required_field(database_data, "path", "database"),
    )

    # ServerConfig
    server_data = data.get("server") or {}
    server = ServerConfig(
        host=server_data.get("host", "0.0.0.0"),
        port=_parse_port(server_data.get("port", 3000)),
    )

    # AdmissionConfig
    admission = _parse_admission(data.get("admission") or {})

    # DocsConfig
    docs_data = data.get("docs") or {}
    docs = DocsConfig(openapi_path=docs_data.get("openapi_path"))

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
            loggers=logging_data.get("loggers"),
        )

    return Config(
        database=database,
        server=server,
        admission=admission,
        docs=docs,
        logging=logging_config,
    )
