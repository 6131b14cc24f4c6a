"""
Application configuration.

All run constants are centralized here. There are no configuration
files; the entry point uses DEFAULT_CONFIG.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Main application configuration."""
    
    # ─────────────────────────────────────────────────────────────────────────
    # Window Settings
    # ─────────────────────────────────────────────────────────────────────────
    
    title: str = "SuckaBunch"
    window_width: int = 1280
    window_height: int = 720
    
    # Center the window on the primary display
    centered: bool = True
    
    # Target frame rate (fixed sleep per frame, not a precise timer)
    target_fps: int = 60
    
    # ─────────────────────────────────────────────────────────────────────────
    # Scene
    # ─────────────────────────────────────────────────────────────────────────
    
    rect_x: int = 100
    rect_y: int = 100
    rect_width: int = 200
    rect_height: int = 150
    
    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as tuple."""
        return (self.window_width, self.window_height)
    
    @property
    def rect(self) -> tuple[int, int, int, int]:
        """Get the rectangle as (x, y, w, h)."""
        return (self.rect_x, self.rect_y, self.rect_width, self.rect_height)
    
    @property
    def frame_interval(self) -> float:
        """Seconds to sleep after each presented frame."""
        return 1.0 / self.target_fps


DEFAULT_CONFIG = Config()
