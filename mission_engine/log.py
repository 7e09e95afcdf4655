"""Logging configuration for the mission engine."""
from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import get_log_backup_count, get_log_dir, get_log_level, get_log_to_file


def setup_logger(verbose: bool = False, save_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure logging for a host process.

    Args:
        verbose: If True, set level to DEBUG, otherwise the configured level
        save_to_file: If True, also log to a timestamped file; None uses
            the MC_LOG_TO_FILE setting

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else get_log_level())
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    simple_formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    # Only engine records on the console
    console_handler.addFilter(lambda record: record.name.startswith("mission_engine"))
    logger.addHandler(console_handler)

    if save_to_file is None:
        save_to_file = get_log_to_file()

    if save_to_file:
        try:
            log_dir = Path(get_log_dir())
            log_dir.mkdir(parents=True, exist_ok=True)
            _prune_old_logs(log_dir, get_log_backup_count() - 1)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"missions_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file}")
        except OSError as e:
            logger.error(f"Failed to create file handler: {e}")

    return logger


def _prune_old_logs(log_dir: Path, keep: int) -> None:
    logs = sorted(log_dir.glob("missions_*.log"))
    for old in logs[: max(0, len(logs) - keep)]:
        old.unlink()
