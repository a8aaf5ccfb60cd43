"""
Logging configuration for jaildash.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    component_name: str = "jaildash",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the root logger for the dashboard process.

    Args:
        component_name: Tag shown in every line (e.g., 'jaildash')
        level: Logging level, as a number or a name like 'DEBUG'
        log_file: Optional file path for log output
        format_string: Custom format string (default provided)
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(component_name)
    logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")

    return logger
