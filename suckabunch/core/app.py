"""
Main application class.

Handles the frame loop: poll events, draw, present, sleep.
"""

import logging
import time
from typing import Callable, Iterable, Optional

import pygame

from ..config import Config
from ..input.manager import InputManager
from ..ui.screen import StaticScreen
from .display import DisplaySurface

logger = logging.getLogger(__name__)


class Application:
    """
    Main application controller.
    
    Owns the display surface for its whole lifetime and runs the
    single-threaded frame loop until a quit request arrives.
    """
    
    def __init__(
        self,
        config: Config,
        display: Optional[DisplaySurface] = None,
        event_source: Optional[Callable[[], Iterable[pygame.event.Event]]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the application.
        
        Args:
            config: Application configuration
            display: Display surface to draw on (created from config if None)
            event_source: Non-blocking poll returning this tick's events
            sleep: Frame pacing function, called with seconds
        """
        self.config = config
        self.display = display if display is not None else DisplaySurface(config)
        self._poll_events = event_source if event_source is not None else pygame.event.get
        self._sleep = sleep
        
        self.input_manager = InputManager()
        self.screen = StaticScreen(config)
        
        self.running = False
        self.frame_count = 0
        self._initialized = False
        self._released = False
    
    def initialize(self) -> None:
        """
        Open the window.
        
        Raises:
            DisplayInitError: If the window cannot be created
        """
        if self._initialized:
            return
        self.display.open()
        self._initialized = True
    
    def run(self) -> None:
        """Main application loop. Resources are released when it returns."""
        try:
            self.initialize()
            self.running = True
            logger.info("SuckaBunch running")
            
            while self.running:
                if self.input_manager.drain(self._poll_events()):
                    self.running = False
                    break
                
                self._render()
                self._sleep(self.config.frame_interval)
        finally:
            self.running = False
            self.cleanup()
        
        logger.info(f"Stopped after {self.frame_count} frames")
    
    def _render(self) -> None:
        """Render and present the current frame."""
        surface = self.display.get_surface()
        self.screen.render(surface)
        self.display.present()
        self.frame_count += 1
    
    def cleanup(self) -> None:
        """Clean up resources."""
        if self._released:
            return
        self._released = True
        self.display.close()
