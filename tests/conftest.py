# tests/conftest.py
import os
import sys
from pathlib import Path

# Headless SDL so pygame surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add project root to sys.path so "sudoku_board" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
