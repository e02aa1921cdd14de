import sys
from pathlib import Path


# Ensure the repository root is on sys.path for tests that import modules directly.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
