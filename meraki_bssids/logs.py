from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: str = ".", debug: bool = False, now: Optional[datetime] = None) -> str:
    """File logging only; the console is kept for operator messages."""
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, f"meraki_bssids_{stamp}.log")
    logging.basicConfig(
        filename=log_filename,
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    # urllib3 logs full request URLs at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log_filename


def log_and_print(message: str, level: str = "info") -> None:
    print(message)
    logger = logging.getLogger("meraki_bssids")
    if level == "debug":
        logger.debug(message)
    elif level == "warning":
        logger.warning(message)
    elif level == "error":
        logger.error(message)
    else:
        logger.info(message)
