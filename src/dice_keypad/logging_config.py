"""
Logging setup for dice-keypad.

Console output goes to stderr: stdout belongs to the MCP stdio transport.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name."""

    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        original_levelname = record.levelname
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            # other handlers share the record
            record.levelname = original_levelname


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path; the file always gets uncoloured output
        format_string: Optional custom format string
        use_colors: Colour the console level names

    Returns:
        The configured root logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    # the file handler records DEBUG regardless of the console level
    logger.setLevel(logging.DEBUG if log_file else numeric_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    if use_colors:
        console_handler.setFormatter(ColoredFormatter(format_string))
    else:
        console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(file_handler)

    return logger


__all__ = ["ColoredFormatter", "setup_logging"]
