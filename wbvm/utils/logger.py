"""Logging setup."""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(log_dir: Optional[Path] = None, verbose: bool = False):
    """Setup logging configuration."""
    log_dir = log_dir or (Path.home() / ".cache" / "wbvm")

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # File handler; a read-only home still gets console output
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "wbvm.log")
    except OSError:
        file_handler = None
    if file_handler:
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # aiohttp chatters at DEBUG
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
