"""
UI module.

Color palette and the static screen drawn every frame.
"""

from .colors import COLORS, RGB
from .screen import StaticScreen

__all__ = ["COLORS", "RGB", "StaticScreen"]
