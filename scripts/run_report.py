#!/usr/bin/env python3
"""
run_report.py
- Load the three UFC datasets and the world map from data/original/
- Clean, aggregate, and run QC checks
- Save figures into reports/figures/ and the narrative into reports/ufc_report.md
"""

import sys
from pathlib import Path

# ensure repo root on path for package imports when running as script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from ufc_report.report import main

if __name__ == "__main__":
    main()
