#!/usr/bin/env python3
"""
Global instances to be used across the entire project.
"""

from ..utils.logging_utils import Logger

# GLOBAL INSTANCES
logger = Logger()


def reset_globals():
    """Reset the global instances to their initial state."""
    logger.reset()
