"""
Logging setup for the expense parser entry points (CLI, API, Streamlit).
Library modules only call logging.getLogger(__name__).
"""

import logging
import sys
from typing import Optional
from expense_parser.config import config

# Handlers installed here carry this name so a repeated setup call (Streamlit
# reruns the script on every interaction) replaces them instead of stacking.
HANDLER_NAME = "expense_parser"

QUIET_LOGGERS = ("fitz", "reportlab", "multipart", "urllib3", "watchdog")


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        log_level: Level name; defaults to LOG_LEVEL, unknown names fall back to INFO
        log_file: Optional log file name, placed in LOG_DIR
        console_output: Log to stderr, leaving stdout to the CLI's JSON

    Returns:
        The root logger
    """
    level_name = (log_level or config.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(config.get_log_path(log_file), mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
