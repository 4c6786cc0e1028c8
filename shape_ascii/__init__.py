"""
Shape-Vector ASCII Art Renderer

Converts images or rendered text to ASCII art by matching the local
geometry of each output cell to the closest-looking character:
- 6-region circle sampling of every cell
- Per-cell contrast enhancement
- Nearest-signature matching with a quantized match cache
"""

__version__ = "0.1.0"

from .charsets import CharacterShape, ShapeLibrary, get_shape_library, list_shape_libraries
from .sampling import PixelBuffer, sample_cell
from .preprocessing import enhance_contrast, invert_vector
from .matcher import CharacterMatcher, MatchCache
from .renderer import RenderOptions, ShapeRenderer, render_to_ascii
from .result import ASCIIResult
from .pipeline import image_to_ascii, text_to_ascii, demo_to_ascii

__all__ = [
    "CharacterShape",
    "ShapeLibrary",
    "get_shape_library",
    "list_shape_libraries",
    "PixelBuffer",
    "sample_cell",
    "enhance_contrast",
    "invert_vector",
    "CharacterMatcher",
    "MatchCache",
    "RenderOptions",
    "ShapeRenderer",
    "render_to_ascii",
    "ASCIIResult",
    "image_to_ascii",
    "text_to_ascii",
    "demo_to_ascii",
]
