"""
Extraction context logger.

Provides logging interface for the extraction context with automatic [extract] prefix.
Extraction modules import from this module, not from loguru directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from sieve.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[extract]"


def setup_extraction_logger(log_dir: Path, dictionary_source: str = "built-in") -> Path:
    """
    Setup logger for extraction context.

    Args:
        log_dir: Directory for this logging session
        dictionary_source: Where entity dictionaries came from (for provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="extract",
        log_dir=log_dir,
        extra_provenance={"Entity dictionaries": dictionary_source},
    )


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [extract] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_pattern_summary(matches: dict) -> None:
    """Log how many matches each pattern produced."""
    if not matches:
        _log_debug("No pattern matches")
        return
    counts = ", ".join(f"{name}={len(found)}" for name, found in matches.items())
    _log_debug(f"Pattern matches: {counts}")


def log_classification(entity_type: str, required: int, preferred: int, leadership: int) -> None:
    """Log bucket sizes of a classification run."""
    _log_debug(
        f"Classified {entity_type}: {required} required, "
        f"{preferred} preferred, {leadership} leadership"
    )


def log_dictionary_loaded(config_path: Path, categories: int, terms: int) -> None:
    """Log a dictionary override file load."""
    _log_info(f"Loaded {terms} terms in {categories} categories from {config_path}")


def log_request_parsed(request_id: Optional[str], confidence: float, warnings: list[str]) -> None:
    """Log the outcome of a full request parse."""
    _log_info(f"Parsed request {request_id or '(no id)'} (confidence {confidence:.2f})")
    for warning in warnings:
        _log_warning(f"  {warning}")
