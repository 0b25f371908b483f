import logging
import os
from datetime import datetime


def setup_logger(log_dir: str = ".code_evolve/logs") -> logging.Logger:
    """Creates a file logger. All verbose output goes here."""
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"code_evolve_{timestamp}.log")

    logger = logging.getLogger("code_evolve")
    logger.setLevel(logging.DEBUG)

    # One file handler per log directory
    abs_dir = os.path.abspath(log_dir)
    for handler in logger.handlers:
        if (isinstance(handler, logging.FileHandler)
                and os.path.dirname(handler.baseFilename) == abs_dir):
            return logger

    # File handler — captures everything
    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"
    ))
    logger.addHandler(fh)

    return logger


# Package logger; handlers are attached by setup_logger()
log = logging.getLogger("code_evolve")


ICONS = {
    "exact":   "✔",
    "fuzzy":   "≈",
    "none":    "✘",
}


def print_status(icon: str, message: str) -> None:
    """Print one status line to the terminal."""
    print(f"  {ICONS.get(icon, icon)} {message}")


def print_error(message: str) -> None:
    print(f"\n  [ERROR] {message}\n")
