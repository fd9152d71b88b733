"""
locize-sync - keep a locize project in sync with the translation keys used in a codebase.
"""

import asyncio
import sys

from .main import main as async_main


def main() -> None:
    """Synchronous entry point that runs the async main function."""
    try:
        exit_code = asyncio.run(async_main())
    except KeyboardInterrupt:
        import logging

        logger = logging.getLogger(__name__)
        logger.info("Stopped by user")
        sys.exit(130)
    except Exception as e:
        try:
            import logging

            logger = logging.getLogger(__name__)
            logger.exception(f"locize-sync failed: {e}")
        except Exception:  # noqa: BLE001
            print(f"locize-sync failed: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


__all__ = ["main"]
