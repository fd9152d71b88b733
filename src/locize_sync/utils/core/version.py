"""
Version utilities for locize-sync.

The version is read from the installed distribution metadata, with a
placeholder when running from an uninstalled checkout.
"""

import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "locize-sync"


@lru_cache(maxsize=1)
def get_version() -> str:
    """
    Get the installed package version.

    Returns:
        Version string (e.g., "1.0.0"), or "0.0.0+unknown" if the package
        is not installed
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("Package metadata not found, using placeholder version")
        return "0.0.0+unknown"
