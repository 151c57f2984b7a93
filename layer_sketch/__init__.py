"""
Layer Sketch - a layered raster drawing surface built on PyQt6.
"""

__version__ = "0.1.0"
