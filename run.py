#!/usr/bin/env python
"""
Launcher script for the Stockroom application.

This script puts src/ on the Python path so the app runs without installing.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_src = Path(__file__).parent / "src"
sys.path.insert(0, str(project_src))

# Now import and run the main application
from stockroom.main import main

if __name__ == "__main__":
    main()
