"""
Process-wide logging for the dashboard service and its check sync workers.

Every module logs through `logging.getLogger(__name__)`; this sets up where
those records go, once, from the launcher.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """Accept either a logging constant or a level name such as 'debug'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    component_name: str,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
):
    """
    Send log records to stdout, and to `log_file` when given.

    Lines are tagged with the upper-cased component name, e.g.
    `[2026-01-01 12:00:00] [DASHBOARD] INFO - Created check 'CPU' with id 42`.
    Returns the component's logger.
    """
    level = resolve_level(level)
    format_string = format_string or f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_string, datefmt=DATE_FORMAT, handlers=handlers)

    logger = logging.getLogger(component_name)
    logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")
    return logger
