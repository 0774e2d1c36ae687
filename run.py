#!/usr/bin/env python3
"""
BE-Alert Converter - Entry Point

Usage:
    python run.py                        # Interactive mode
    python run.py convert leden.xlsx     # Convert to leden.csv
    python run.py check leden.xlsx       # Check required columns
    python run.py config                 # Show configuration status
    python run.py version                # Show version
"""

import sys

from bealert.cli import main

if __name__ == '__main__':
    sys.exit(main())
