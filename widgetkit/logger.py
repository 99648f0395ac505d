"""Logging configuration for the demos."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

def setup_logger(log_dir: Optional[Path] = None, debug_mode: bool = False):
    """
    Configure the widgetkit logger.

    Args:
        log_dir: Directory for the debug log file. No file is written without it.
        debug_mode: If True, sets logging level to DEBUG and enables file logging.
    """
    logger = logging.getLogger('widgetkit')
    logger.handlers.clear()  # Prevent duplicate handlers across runs

    log_level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(log_level)

    # Console Handler - trace lines go to stdout as plain messages
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if debug_mode and log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"widgetkit_debug_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(module)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

        logger.debug(f"Debug mode enabled. Detailed logs will be saved to: {log_file}")

    return logger
