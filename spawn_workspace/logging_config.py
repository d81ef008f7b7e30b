"""Logging configuration for spawn-workspace"""
import logging
import sys
from pathlib import Path

LOG_DIR = Path.home() / '.spawn-workspace'
LOG_FILE_NAME = 'spawn-workspace.log'


class ColoredFormatter(logging.Formatter):
    """Prefixes each record with a level symbol, colored when stderr is a terminal."""

    SYMBOLS = {
        'DEBUG': '·',
        'INFO': 'ℹ',
        'WARNING': '⚠',
        'ERROR': '✗',
        'CRITICAL': '✗',
    }

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[34m',      # Blue
        'WARNING': '\033[1;33m', # Bold yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt='%(symbol)s %(message)s', datefmt=None, use_color=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        """Format log record, setting ``record.symbol`` for the format string."""
        symbol = self.SYMBOLS.get(record.levelname, record.levelname)
        use_color = sys.stderr.isatty() if self.use_color is None else self.use_color
        if use_color and record.levelname in self.COLORS:
            symbol = f"{self.COLORS[record.levelname]}{symbol}{self.RESET}"
        record.symbol = symbol
        return super().format(record)


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Warnings (skipped worktrees, auto-created branches) are always shown.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages with timestamps and logger
            names, and keep a copy in ~/.spawn-workspace/spawn-workspace.log
    """
    level = _level_for(verbose, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / LOG_FILE_NAME, mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if debug:
        console_handler.setFormatter(ColoredFormatter(
            fmt='%(asctime)s %(symbol)s [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        ))
    else:
        console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, named without the ``spawn_workspace.`` prefix."""
    prefix = 'spawn_workspace.'
    if name.startswith(prefix):
        name = name[len(prefix):]
    return logging.getLogger(name)
