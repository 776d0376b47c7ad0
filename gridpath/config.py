"""
Configuration constants for gridpath.

Grid limits match the editor the planner serves. The log level is read
from the environment.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

# =============================================================================
# Coordinate Representation
# =============================================================================

# Coordinates are stored as unsigned 8-bit values
MAX_COORD = 255

# =============================================================================
# Grid Limits
# =============================================================================

MIN_WIDTH = 10
MAX_WIDTH = 50
MIN_HEIGHT = 10
MAX_HEIGHT = 50

# A fresh grid starts at the smallest allowed size
DEFAULT_WIDTH = MIN_WIDTH
DEFAULT_HEIGHT = MIN_HEIGHT

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRIDPATH_LOG_LEVEL", "INFO")


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic root handler at ``level`` (defaults to ``LOG_LEVEL``)."""
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO))
