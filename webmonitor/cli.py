import argparse
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn

from .config import Settings
from .logging_config import setup_logging
from .main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webmonitor",
        description="Monitor the availability of web services.",
        epilog="Example: webmonitor --port 8080",
    )
    parser.add_argument("--port", type=int, required=True, help="port to serve on (required)")
    parser.add_argument("--host", help="address to bind (default: 0.0.0.0)")
    parser.add_argument("--data-dir", type=Path, help="directory holding services.json")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    settings = Settings(**overrides)

    setup_logging(settings.log_level)
    app = create_app(settings)

    logger.info("Server started on http://localhost:%d", args.port)
    uvicorn.run(app, host=settings.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
