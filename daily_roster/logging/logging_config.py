import logging
import logging.handlers
import os
from pathlib import Path


FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_PREFIX = "daily-roster"

# Loggers of libraries the service runs on; their records go through our handlers
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
# googleapiclient warns about its discovery cache on every build() without cache_discovery
QUIET_LOGGERS = {"googleapiclient.discovery_cache": logging.ERROR}


def _rotating_handler(path: Path, level: int, name: str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.set_name(name)
    handler.setLevel(level)
    return handler


def setup_logging(log_dir: str | Path, level: str = "INFO", app_name: str = "daily-roster") -> None:
    """Configure application logging

    Args:
        log_dir: Directory for the rotating log files
        level: Level name for the console and main log file
        app_name: Name to use for log files

    Calling it again replaces the handlers installed by the previous call.

    """
    log_dir = Path(log_dir)
    os.makedirs(log_dir, exist_ok=True)
    numeric_level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{HANDLER_PREFIX}-console")
    console_handler.setLevel(numeric_level)

    file_handler = _rotating_handler(log_dir / f"{app_name}.log", numeric_level, f"{HANDLER_PREFIX}-file")

    # Sheet read failures are logged at ERROR and also land in their own file
    error_handler = _rotating_handler(log_dir / f"{app_name}-error.log", logging.ERROR, f"{HANDLER_PREFIX}-error")

    formatter = logging.Formatter(FORMAT)
    for handler in (console_handler, file_handler, error_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers.clear()
        routed.propagate = True
    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    root_logger.info(f"Logging to {log_dir} at {level.upper()}")
