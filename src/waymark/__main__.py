"""Entry point for Waymark."""

import logging
import sys

from .app import run_app
from .config import Config
from .logs import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for Waymark."""
    try:
        # Load configuration
        config = Config.load()

        setup_logging(config)
        logger.info("Starting Waymark")

        # Run the application
        run_app(config)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
