"""
Wang Tiles - Editor Algorithms

Contains algorithmic tools for the editor (e.g., Wang fill).
"""

from .wang_fill import FillResult, WangFiller

__all__ = ["FillResult", "WangFiller"]
