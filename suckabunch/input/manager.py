"""
Input manager.

Maps raw pygame events to the few logical events the
application reacts to.
"""

import pygame
from enum import Enum, auto
from typing import Iterable, Optional


class InputEvent(Enum):
    """Abstract input events."""
    
    # Window close button or Escape key
    QUIT = auto()


class InputManager:
    """
    Turns the polled event queue into a stop/continue decision.
    """
    
    KEY_MAP = {
        pygame.K_ESCAPE: InputEvent.QUIT,
    }
    
    def __init__(self):
        # Events looked at during the most recent drain()
        self.last_examined = 0
    
    def process_event(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """
        Process a pygame event and return an input event.
        
        Args:
            event: Pygame event to process
        
        Returns:
            InputEvent if event was recognized, None otherwise
        """
        if event.type == pygame.QUIT:
            return InputEvent.QUIT
        
        if event.type == pygame.KEYDOWN:
            return self.KEY_MAP.get(event.key)
        
        return None
    
    def drain(self, events: Iterable[pygame.event.Event]) -> bool:
        """
        Examine one tick's worth of events in order.
        
        Stops at the first quit request; events after it are not looked at.
        
        Args:
            events: Events polled for this frame
        
        Returns:
            True if the application should stop
        """
        self.last_examined = 0
        for event in events:
            self.last_examined += 1
            if self.process_event(event) is InputEvent.QUIT:
                return True
        return False
