"""
Logging utilities
"""
import logging
import sys
from typing import Optional

from perplexity_mcp.config.settings import settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Records go to stderr: stdout carries the MCP stdio protocol.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name or "perplexity-search-server")

    if logger.handlers:
        return logger

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
