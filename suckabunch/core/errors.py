"""
Application exceptions.
"""


class SuckaBunchError(Exception):
    """Base class for application errors."""


class DisplayInitError(SuckaBunchError):
    """
    The window or its canvas could not be created.
    
    Raised by the display layer; only the entry point decides to abort.
    """
