import logging

import uvicorn

from daily_roster.config import load_config
from daily_roster.logging.logging_config import setup_logging


# ruff: noqa: D103
def main() -> None:
    config = load_config()

    setup_logging(config["LOG_DIR"], config["LOG_LEVEL"])
    logger = logging.getLogger(__name__)
    logger.info("Starting Daily Roster API")

    uvicorn.run(
        "daily_roster.api.main:app",
        host=config["API_HOST"],
        port=config["API_PORT"],
        log_config=None,
    )


if __name__ == "__main__":
    main()
