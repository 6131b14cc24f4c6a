"""
Display surface.

Owns the SuckaBunch window and the canvas the frame is drawn on.
"""

import logging
import os

import pygame

from ..config import Config
from .errors import DisplayInitError

logger = logging.getLogger(__name__)


class DisplaySurface:
    """
    Window + canvas pair.
    
    The pygame module is passed in as the backend so the window can be
    created against a stand-in during tests. open() is the only place
    that acquires the video subsystem and close() the only place that
    releases it.
    """
    
    def __init__(self, config: Config, backend=pygame):
        """
        Initialize the display surface.
        
        Args:
            config: Application configuration
            backend: Module providing the pygame display API
        """
        self.config = config
        self._backend = backend
        self.canvas = None
        self.closed = False
    
    @property
    def is_open(self) -> bool:
        """True once the window exists and until it is closed."""
        return self.canvas is not None and not self.closed
    
    def open(self):
        """
        Create the window and its canvas.
        
        Calling open() again returns the existing canvas.
        
        Returns:
            The drawable window surface
        
        Raises:
            DisplayInitError: If the video subsystem, the window or the
                canvas cannot be created
        """
        if self.canvas is not None:
            return self.canvas
        
        # SDL reads this when the window is created
        if self.config.centered:
            os.environ['SDL_VIDEO_CENTERED'] = '1'
        
        width, height = self.config.window_size
        try:
            self._backend.display.init()
            self._backend.display.set_caption(self.config.title)
            canvas = self._backend.display.set_mode(self.config.window_size)
        except self._backend.error as e:
            raise DisplayInitError(
                f"Could not create {width}x{height} window '{self.config.title}': {e}"
            ) from e
        
        if canvas is None:
            raise DisplayInitError("Video driver returned no canvas")
        
        self.canvas = canvas
        logger.info(f"Window '{self.config.title}' opened at {width}x{height}")
        return self.canvas
    
    def get_surface(self):
        """
        Get the canvas to draw on.
        
        Returns:
            The window surface
        """
        return self.canvas
    
    def present(self) -> None:
        """Flip the canvas to the screen."""
        self._backend.display.flip()
    
    def close(self) -> None:
        """Release the window and shut pygame down. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        self.canvas = None
        
        self._backend.display.quit()
        self._backend.quit()
        logger.debug("Display released")
