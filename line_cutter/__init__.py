"""
Text Line Cutter

Finds horizontal bands of text in scanned document images and marks a
cutting line through the middle of every gap between them.
"""

__version__ = "1.0.0"
