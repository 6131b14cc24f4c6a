"""
Static screen.

Draws the only frame the application ever shows: a lavender
background with a red rectangle on it.
"""

import logging

import pygame

from ..config import Config
from .colors import COLORS

logger = logging.getLogger(__name__)


class StaticScreen:
    """
    Full-window view with a single filled rectangle.
    
    Every call to render() produces the same pixels.
    """
    
    def __init__(self, config: Config):
        """
        Initialize the screen.
        
        Args:
            config: Application configuration (rectangle geometry)
        """
        self.config = config
        self.rect = pygame.Rect(config.rect)
    
    def render(self, surface: pygame.Surface) -> None:
        """
        Render the frame.
        
        A failed rectangle fill is dropped; the background is still drawn.
        
        Args:
            surface: Surface to render on
        """
        surface.fill(COLORS["background"])
        
        try:
            pygame.draw.rect(surface, COLORS["rect_fill"], self.rect)
        except pygame.error as e:
            logger.debug(f"Rectangle fill failed: {e}")
