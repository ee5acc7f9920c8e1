#!/usr/bin/env python3
"""Run the scripted bank account demo.

Usage:
    python scripts/run_demo.py
    python scripts/run_demo.py --output json
    python scripts/run_demo.py --extra-accounts 5 --seed 42
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_demo.cli import main

if __name__ == "__main__":
    sys.exit(main())
