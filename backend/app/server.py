import argparse
import logging
from typing import Optional

import uvicorn

from app import config
from app.logging_config import configure_logging
from app.main import create_app
from app.storage import ItemStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the in-memory items API.")
    parser.add_argument("--host", default=config.HOST, help="Bind address (env: ITEMS_API_HOST).")
    parser.add_argument("--port", type=int, default=config.PORT, help="Bind port (env: ITEMS_API_PORT).")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Root log level (env: ITEMS_API_LOG_LEVEL).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    app = create_app(ItemStore())
    logger.info("listening on %s:%s", args.host, args.port)
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_config=None,
        access_log=config.ACCESS_LOG,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
