"""設定データクラス"""

from dataclasses import dataclass, field

DEFAULT_ALLOWED_HOSTS: tuple[str, ...] = (
    "example.com",
    "www.example.com",
    "localhost:3000",
    "127.0.0.1:3000",
)

ORIGIN_MATCHING_STRICT = "strict"
ORIGIN_MATCHING_LEGACY = "legacy"
ORIGIN_MATCHING_MODES = (ORIGIN_MATCHING_STRICT, ORIGIN_MATCHING_LEGACY)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "0.0.0.0"
    port: int = 3000


@dataclass
class AdmissionConfig:
    """アクセス元ドメイン制限設定

    Attributes:
        allowed_hosts: 許可するホスト（"host" または "host:port"）
        origin_matching: Origin/Referer の照合方式
            "strict": URL として解析し、ホスト部の完全一致またはサブドメイン一致
            "legacy": 部分文字列一致（旧実装互換）
    """

    allowed_hosts: list[str] = field(
        default_factory=lambda: list(DEFAULT_ALLOWED_HOSTS)
    )
    origin_matching: str = ORIGIN_MATCHING_STRICT


@dataclass
class DatabaseConfig:
    """データベース設定"""

    path: str


@dataclass
class DocsConfig:
    """APIドキュメント設定

    Attributes:
        openapi_path: OpenAPI 定義ファイルのパス（None の場合は同梱ファイル）
    """

    openapi_path: str | None = None


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """アプリケーション設定"""

    database: DatabaseConfig
    server: ServerConfig = field(default_factory=ServerConfig)
    admission: AdmissionConfig = field(default_factory=AdmissionConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    logging: LoggingConfig | None = None
