#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

SOURCE_DIR = Path(__file__).resolve().parents[1] / "source"
if str(SOURCE_DIR) not in sys.path:
    sys.path.insert(0, str(SOURCE_DIR))

from app.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
