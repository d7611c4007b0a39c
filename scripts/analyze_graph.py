#!/usr/bin/env python
"""
Thin CLI wrapper for relationship graph analysis.
Prefer using the console script entry point, but allow direct execution.
"""

import sys
from pathlib import Path

try:
    from relgraph.analysis.cli import main
except ModuleNotFoundError:
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
    from relgraph.analysis.cli import main

if __name__ == "__main__":
    sys.exit(main())
