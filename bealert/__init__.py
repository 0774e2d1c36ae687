"""
BE-Alert converter: member spreadsheets to BE-Alert BIN import CSV
"""

from core import __version__

__all__ = ['__version__']
