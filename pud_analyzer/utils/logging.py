"""Logging configuration for the PUD analyzer."""
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


def setup_logging(log_dir: Optional[Union[str, Path]] = None,
                  log_level: int = logging.INFO) -> Optional[Path]:
    """Setup logging configuration.

    Args:
        log_dir: Directory for the log file, console only when None
        log_level: Logging level (default: INFO)

    Returns:
        Path of the log file, if one was created
    """
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_path / f'pud_analyzer_{timestamp}.log'
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(log_level)
    root_logger.addHandler(file_handler)

    root_logger.debug(f"Log file: {log_file}")
    return log_file
