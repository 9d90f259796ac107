"""アプリケーションのエントリポイント"""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path

from userlookup.application.services import UserLookupService
from userlookup.config import Config, ConfigError, LoggingConfig, load_config
from userlookup.infrastructure.http import ApiServer
from userlookup.infrastructure.persistence import (
    DatabaseManager,
    SQLiteUserRepository,
    seed_users,
)
from userlookup.presentation import AdmissionPolicy, create_app
from userlookup.presentation.docs import load_openapi_document

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    # Get root logger
    root_logger = logging.getLogger()

    # Set root level
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    # Configure individual loggers
    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数を解析する"""
    parser = argparse.ArgumentParser(
        prog="userlookup",
        description="User lookup service (REST + GraphQL)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config.yaml (default: ./config.yaml)",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Replace all users with the sample users and exit",
    )
    return parser.parse_args(argv)


async def seed(config: Config) -> None:
    """サンプルユーザーを投入する"""
    db_manager = DatabaseManager(config.database.path)
    try:
        await db_manager.create_tables()
        await seed_users(SQLiteUserRepository(db_manager.get_session))
    finally:
        await db_manager.close()


async def serve(config: Config) -> None:
    """サーバーを起動し、シグナル受信まで待機する"""
    # Initialize database
    db_manager = DatabaseManager(config.database.path)
    await db_manager.create_tables()

    # Build dependencies
    user_repository = SQLiteUserRepository(db_manager.get_session)
    user_service = UserLookupService(user_repository)
    admission_policy = AdmissionPolicy(
        config.admission.allowed_hosts,
        origin_matching=config.admission.origin_matching,
    )
    logger.info(
        "Allowed hosts: %s (origin matching: %s)",
        ", ".join(admission_policy.allowed_hosts),
        admission_policy.origin_matching,
    )

    app = create_app(
        user_service=user_service,
        admission_policy=admission_policy,
        db_manager=db_manager,
        openapi_document=load_openapi_document(config.docs.openapi_path),
    )
    server = ApiServer(app, host=config.server.host, port=config.server.port)

    try:
        await server.start()

        # Setup signal handlers for graceful shutdown
        stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()

        def shutdown_handler() -> None:
            logger.info("Received shutdown signal...")
            stop_event.set()

        loop.add_signal_handler(signal.SIGINT, shutdown_handler)
        loop.add_signal_handler(signal.SIGTERM, shutdown_handler)

        # Wait for shutdown signal
        await stop_event.wait()

        logger.info("Shutting down...")
    finally:
        await server.stop()

        # Close database connections
        await db_manager.close()

    logger.info("Shutdown complete")


async def main(argv: list[str] | None = None) -> None:
    """アプリケーションを起動する"""
    args = parse_args(argv)

    if not args.config.exists():
        logger.error("%s not found", args.config)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    # Apply logging configuration
    configure_logging(config.logging)

    if args.seed:
        await seed(config)
        return

    await serve(config)


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
