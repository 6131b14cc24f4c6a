"""
SuckaBunch - a single pygame window drawing one red rectangle.
"""

__version__ = "0.1.0"
