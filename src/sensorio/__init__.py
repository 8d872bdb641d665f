"""
SENSORIO - A camera sensor database editor.

This package provides tools for loading, editing, and exporting the flat
camera sensor dataset (Brand -> Model -> Mode) used by vision tools.
"""

__version__ = "0.1.0"
