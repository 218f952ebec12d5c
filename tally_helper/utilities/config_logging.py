# tally_helper/utilities/config_logging.py
from __future__ import annotations

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

LOG_FILE_NAME = "tally_helper.log"

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {"format": "%(levelname)s: %(message)s"},
        "detailed": {
            "format": "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        # stdout carries the per-file summary lines printed by the CLI
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": f"logs/{LOG_FILE_NAME}",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root: third-party libraries only get through from WARNING up
        "": {
            "level": "WARNING",
            "handlers": ["console", "file"],
        },
        "tally_helper": {"level": "DEBUG", "propagate": True},
        # openpyxl reports workbook oddities through `warnings`; see configure_logging
        "py.warnings": {"level": "WARNING", "propagate": True},
    },
}


def configure_logging(log_dir: Path | str = "logs", *, verbose: bool = False) -> None:
    """Apply `LOGGING` with the rotating file placed under `log_dir`.

    The directory is created first; ``RotatingFileHandler`` refuses to open a
    file in a missing directory. ``verbose`` lowers the console handler to DEBUG.
    Python warnings are routed into the ``py.warnings`` logger so they land in
    the log file instead of going straight to stderr.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    config = copy.deepcopy(LOGGING)
    config["handlers"]["file"]["filename"] = str(log_dir / LOG_FILE_NAME)
    if verbose:
        config["handlers"]["console"]["level"] = "DEBUG"
    logging.config.dictConfig(config)
    logging.captureWarnings(True)
