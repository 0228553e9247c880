#!/usr/bin/env python3
"""Main entry point for the account ledger console"""

import sys

from .config import get_config, report_config_error
from .console import ConsoleDriver
from .ledger import Ledger
from .logging_config import setup_logging


def main() -> int:
    """Start one console session"""
    config = get_config()
    logger = setup_logging(level=config.log_level, log_format=config.log_format)
    report_config_error(logger)

    return ConsoleDriver(Ledger()).run()


if __name__ == "__main__":
    sys.exit(main())
