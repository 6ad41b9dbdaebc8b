"""Configure pytest."""

import sys
from pathlib import Path

# Get the project root directory
root_dir = Path(__file__).parent

# Add src directory to Python path so tests run without an editable install
src_path = str(root_dir / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)
