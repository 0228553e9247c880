#!/usr/bin/env python3
"""
Account Ledger Entry Point

Starts an interactive console session from a source checkout.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from account_ledger.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
