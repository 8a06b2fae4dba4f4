#!/usr/bin/env python3
"""
Main entry point for the PUBG QnA console client.
Allows running the package with: python -m pubg_qna
"""
import sys
import logging

from .config import get_config
from .errors import ConfigurationError
from .utils import setup_logging
from . import QnASession

logger = logging.getLogger("main")


def main():
    """Load settings, connect the services and run the menu loop."""
    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
        sys.exit(1)

    setup_logging(config.log_file, config.log_level)
    logger.info(f"Starting QnA client for project {config.project_name}/{config.deployment_name}")

    session = QnASession.from_config(config)
    try:
        session.run()
    except KeyboardInterrupt:
        print()
        print("Exiting the QnA application...")


if __name__ == "__main__":
    main()
