"""
Input handling module.

Classifies pygame events; only window-close and Escape matter.
"""

from .manager import InputManager, InputEvent

__all__ = ["InputManager", "InputEvent"]
