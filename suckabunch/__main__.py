"""
Application entry point.

Usage:
    python -m suckabunch

Opens the SuckaBunch window. Close the window or press Escape to quit.
"""

import logging
import sys

from .config import DEFAULT_CONFIG
from .core.app import Application
from .core.errors import DisplayInitError


def setup_logging() -> None:
    """Configure logging for the application."""
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    
    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(formatter)
    
    # Root logger
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(console)


def main() -> int:
    """Main entry point."""
    setup_logging()
    
    logger = logging.getLogger(__name__)
    logger.info("SuckaBunch starting...")
    
    app = Application(DEFAULT_CONFIG)
    
    try:
        app.run()
    except DisplayInitError as e:
        logger.critical(f"Cannot start: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nShutdown requested...")
    finally:
        app.cleanup()
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
