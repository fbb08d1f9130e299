"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
Intake modules import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from sieve.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this logging session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="intake", log_dir=log_dir)


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_split_summary(
    total_lines: int, meta_lines: int, description_chars: int, item_numbers: list[int]
) -> None:
    """Log the shape of a split document."""
    _log_debug(
        f"Split {total_lines} lines: {meta_lines} meta, "
        f"{description_chars} description chars, {len(item_numbers)} numbered items"
    )
    if item_numbers:
        _log_debug(f"  Item numbers: {item_numbers}")


def log_missing_items(missing: list[int]) -> None:
    """Log gaps in item numbering."""
    if missing:
        _log_debug(f"Numbered list has gaps: {missing}")
