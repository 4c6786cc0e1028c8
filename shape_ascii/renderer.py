"""
Shape-Vector Grid Renderer

Converts a pixel buffer to ASCII art by matching the geometry of every
output cell, rather than its average brightness, to a character.

Per cell:
1. Sample six sub-regions into a 6D vector
2. Invert (optional)
3. Enhance contrast
4. Match the closest character signature (memoized by quantized vector)
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import math
import numbers
import time

from .charsets import ShapeLibrary
from .matcher import CharacterMatcher, MatchCache
from .preprocessing import enhance_contrast, invert_vector
from .sampling import PixelBuffer, sample_cell


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for one shape-vector render."""
    columns: int = 80                  # Output width in characters
    rows: int = 40                     # Output height in lines
    contrast_exponent: float = 2.0     # > 1 sharpens cell geometry
    invert: bool = False               # Treat dark pixels as ink

    def __post_init__(self):
        for name in ('columns', 'rows'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        exponent = self.contrast_exponent
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Real):
            raise ValueError(f"contrast_exponent must be a number, got {exponent!r}")
        if not math.isfinite(exponent) or exponent <= 0:
            raise ValueError(f"contrast_exponent must be finite and positive, got {exponent!r}")


class ShapeRenderer:
    """
    Renders pixel buffers as ASCII art.

    Each renderer owns its own MatchCache, so independent renderers never
    share state. Reusing one renderer across calls keeps the cache warm.

    Example:
        >>> renderer = ShapeRenderer()
        >>> text = renderer.render(buffer, RenderOptions(columns=60, rows=30))
        >>> print(text)
    """

    def __init__(self, library: Optional[ShapeLibrary] = None, use_cache: bool = True):
        """
        Args:
            library: Shape catalog (default: ascii_shapes)
            use_cache: Memoize matches by quantized vector
        """
        self.matcher = CharacterMatcher(library=library, use_cache=use_cache)

    @property
    def cache(self) -> Optional[MatchCache]:
        return self.matcher.cache

    def render_cell(
        self,
        buffer: PixelBuffer,
        cell_x: float,
        cell_y: float,
        cell_width: float,
        cell_height: float,
        options: RenderOptions,
    ) -> str:
        """Resolve one cell to a character."""
        vector = sample_cell(buffer, cell_x, cell_y, cell_width, cell_height)
        if options.invert:
            vector = invert_vector(vector)
        vector = enhance_contrast(vector, options.contrast_exponent)
        return self.matcher.match(vector)

    def render_lines(self, buffer: PixelBuffer, options: RenderOptions) -> List[str]:
        """Render to a list of `options.rows` strings of `options.columns` characters."""
        # Fractional cell size; the sampler floors/ceils the disk bounds
        cell_width = buffer.width / options.columns
        cell_height = buffer.height / options.rows

        lines = []
        for row in range(options.rows):
            y = row * cell_height
            line = ''.join(
                self.render_cell(buffer, col * cell_width, y, cell_width, cell_height, options)
                for col in range(options.columns)
            )
            lines.append(line)

        return lines

    def render(self, buffer: PixelBuffer, options: RenderOptions) -> str:
        """
        Convert a pixel buffer to ASCII art.

        Args:
            buffer: Source pixels
            options: Grid size, contrast and invert settings

        Returns:
            `options.rows` lines joined with newlines
        """
        start_time = time.time()
        lines = self.render_lines(buffer, options)

        if logger.isEnabledFor(logging.DEBUG):
            stats = self.cache.stats() if self.cache is not None else {}
            logger.debug(
                "Rendered %dx%d buffer to %dx%d cells in %.1fms (cache: %s)",
                buffer.width, buffer.height, options.columns, options.rows,
                (time.time() - start_time) * 1000, stats or "disabled",
            )

        return '\n'.join(lines)


def render_to_ascii(
    buffer: PixelBuffer,
    columns: int = 80,
    rows: int = 40,
    contrast_exponent: float = 2.0,
    invert: bool = False,
    library: Optional[ShapeLibrary] = None,
) -> str:
    """
    Quick function to render a buffer with a fresh renderer.

    Args:
        buffer: Source pixels
        columns: Output width in characters
        rows: Output height in lines
        contrast_exponent: Contrast exponent (> 0)
        invert: Treat dark pixels as ink
        library: Shape catalog (default: ascii_shapes)

    Returns:
        ASCII art string
    """
    options = RenderOptions(columns=columns, rows=rows, contrast_exponent=contrast_exponent, invert=invert)
    return ShapeRenderer(library=library).render(buffer, options)
