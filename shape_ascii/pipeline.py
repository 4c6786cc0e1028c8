"""
End-to-End Shape-Vector Pipeline

Convenience entry points that load pixels from an image file, text or
the demo sphere, render them, and wrap the art in an ASCIIResult.
"""

from pathlib import Path
from typing import Optional, Union
import math
import time
from PIL import Image

from .charsets import get_shape_library
from .renderer import RenderOptions, ShapeRenderer
from .result import ASCIIResult, create_result
from .sampling import PixelBuffer
from .sources import DEFAULT_FONT, buffer_from_image, generate_test_pattern, load_image, text_to_buffer


DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 40
DEFAULT_CONTRAST = 1.5

# Terminal cells are about twice as tall as they are wide
CELL_ASPECT = 0.5
MIN_TEXT_ROWS = 5


ImageSource = Union[str, Path, Image.Image, PixelBuffer]


def auto_rows(buffer: PixelBuffer, columns: int, minimum: int = MIN_TEXT_ROWS) -> int:
    """Row count that keeps the buffer's aspect ratio on a terminal."""
    if buffer.width == 0:
        return minimum
    aspect_ratio = buffer.height / buffer.width
    return max(minimum, math.ceil(columns * aspect_ratio * CELL_ASPECT))


def _render(
    buffer: PixelBuffer,
    mode: str,
    options: RenderOptions,
    library: str,
    renderer: Optional[ShapeRenderer],
) -> ASCIIResult:
    if renderer is None:
        renderer = ShapeRenderer(library=get_shape_library(library))

    start_time = time.time()
    text = renderer.render(buffer, options)
    render_time = time.time() - start_time

    return create_result(
        text=text,
        mode=mode,
        library=library,
        columns=options.columns,
        rows=options.rows,
        contrast=options.contrast_exponent,
        invert=options.invert,
        source_size=f"{buffer.width}x{buffer.height}",
        render_time=f"{render_time:.2f}s",
    )


def image_to_ascii(
    image: ImageSource,
    columns: int = DEFAULT_COLUMNS,
    rows: int = DEFAULT_ROWS,
    contrast: float = DEFAULT_CONTRAST,
    invert: bool = False,
    library: str = "ascii_shapes",
    renderer: Optional[ShapeRenderer] = None,
) -> ASCIIResult:
    """
    Convert an image to shape-vector ASCII art.

    Args:
        image: Path, PIL Image or PixelBuffer
        columns: Output width in characters
        rows: Output height in lines
        contrast: Contrast exponent
        invert: Treat dark pixels as ink
        library: Shape library name
        renderer: Renderer to reuse (keeps its match cache warm)

    Returns:
        ASCIIResult with the rendered art
    """
    if isinstance(image, PixelBuffer):
        buffer = image
    elif isinstance(image, Image.Image):
        buffer = buffer_from_image(image)
    else:
        buffer = load_image(image)

    options = RenderOptions(columns=columns, rows=rows, contrast_exponent=contrast, invert=invert)
    return _render(buffer, "image", options, library, renderer)


def text_to_ascii(
    text: str,
    columns: int = DEFAULT_COLUMNS,
    rows: Optional[int] = None,
    font: str = DEFAULT_FONT,
    font_size: int = 150,
    contrast: float = DEFAULT_CONTRAST,
    invert: bool = False,
    library: str = "ascii_shapes",
    renderer: Optional[ShapeRenderer] = None,
) -> ASCIIResult:
    """
    Rasterize text with a font and convert it to ASCII art.

    Args:
        text: Text to draw
        columns: Output width in characters
        rows: Output height (auto from the text's aspect ratio if None)
        font: Font family name or path
        font_size: Font size in pixels for rasterization

    Returns:
        ASCIIResult with the rendered art
    """
    buffer = text_to_buffer(text, font=font, font_size=font_size, bold=True)
    if rows is None:
        rows = auto_rows(buffer, columns)

    options = RenderOptions(columns=columns, rows=rows, contrast_exponent=contrast, invert=invert)
    result = _render(buffer, "text", options, library, renderer)
    result.metadata['font'] = font
    return result


def demo_to_ascii(
    columns: int = DEFAULT_COLUMNS,
    rows: int = DEFAULT_ROWS,
    contrast: float = DEFAULT_CONTRAST,
    invert: bool = False,
    library: str = "ascii_shapes",
    size: int = 400,
) -> ASCIIResult:
    """Render the shaded demo sphere."""
    buffer = generate_test_pattern(size, size)
    options = RenderOptions(columns=columns, rows=rows, contrast_exponent=contrast, invert=invert)
    return _render(buffer, "demo", options, library, None)
