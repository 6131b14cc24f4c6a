"""
Core engine module.

Contains the main application loop and the display surface.
"""

from .app import Application
from .display import DisplaySurface
from .errors import DisplayInitError, SuckaBunchError

__all__ = ["Application", "DisplaySurface", "DisplayInitError", "SuckaBunchError"]
