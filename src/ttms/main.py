"""Application entry point for TTMS auth server."""

import sys

import pydantic
import structlog

from ttms.app import App
from ttms.config import Config
from ttms.errors import ConfigurationError
from ttms.logging import setup_logging
from ttms.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    try:
        config = Config()
    except pydantic.ValidationError as e:
        setup_logging(debug=False)
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.error("config_invalid", fields=missing)  # noqa: TRY400
        sys.exit(1)

    setup_logging(config.debug)
    try:
        app = App(config)
    except ConfigurationError as e:
        logger.error("config_invalid", error=str(e))  # noqa: TRY400
        sys.exit(1)
    run_server(app, config)


if __name__ == "__main__":
    main()
