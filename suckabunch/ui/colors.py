"""
Color palette.

Both colors are fixed for the whole run.
"""

from typing import Dict, Tuple

# Type alias
RGB = Tuple[int, int, int]


# Pale lavender backdrop
BACKGROUND: RGB = (200, 200, 255)

# Solid red rectangle
RECT_FILL: RGB = (255, 0, 0)


COLORS: Dict[str, RGB] = {
    "background": BACKGROUND,
    "rect_fill": RECT_FILL,
}
