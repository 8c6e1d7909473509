"""
Configuration constants for the bfsgraph project.

All paths, sample data, and tunable parameters are defined here.
Environment overrides are read once at import time.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of bfsgraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional environment file loaded by scripts
ENV_FILE_PATH = PROJECT_ROOT / ".env"

# =============================================================================
# Sample Data Configuration
# =============================================================================

# Number of nodes in the demonstration graph
SAMPLE_NODE_COUNT = 5

# Directed edges of the demonstration graph, in insertion order.
# Order matters: it fixes neighbor order and therefore BFS tie-breaking.
SAMPLE_EDGES: list[tuple[int, int]] = [
    (0, 1),
    (0, 4),
    (1, 2),
    (2, 3),
    (3, 4),
    (4, 0),
]

# Static integer array printed by the demo
SAMPLE_VALUES: list[int] = [10, 20, 30, 40, 50]

# =============================================================================
# Traversal Configuration
# =============================================================================

# Start node used by the demo when --start is not given
DEFAULT_START_NODE = 0

# Environment variable overriding DEFAULT_START_NODE
START_NODE_ENV = "BFSGRAPH_START_NODE"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Log line format used by scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Environment Helpers
# =============================================================================


def get_start_node_setting() -> str:
    """Raw start node from the environment, read at call time. The caller parses it."""
    return os.environ.get(START_NODE_ENV, str(DEFAULT_START_NODE))


def get_log_level() -> str:
    """Log level from the environment, or the default if unrecognized."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL
