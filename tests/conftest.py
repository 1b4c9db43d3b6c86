from __future__ import annotations

import sys
from pathlib import Path

# Import cssbuilder from the local src tree, not an installed copy.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))
