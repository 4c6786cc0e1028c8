"""
Pixel Sources

Produce PixelBuffers for the renderer:
- Image files (any format Pillow can decode)
- Text drawn with a TrueType font
- A shaded test sphere for demos
"""

from pathlib import Path
from typing import List, Union
import logging
import math
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .sampling import PixelBuffer


logger = logging.getLogger(__name__)

DEFAULT_FONT = "Arial Black"

# Tried in order after the requested font
FALLBACK_FONTS = [
    "Arial Black.ttf",
    "ariblk.ttf",  # Windows file name
    "/System/Library/Fonts/Supplemental/Arial Black.ttf",  # macOS
    "Impact.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "DejaVuSans-Bold.ttf",
]


def buffer_from_image(image: Image.Image) -> PixelBuffer:
    """Convert a PIL image to an RGBA PixelBuffer."""
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return PixelBuffer(image.width, image.height, image.tobytes())


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """
    Decode an image file into a PixelBuffer.

    Raises:
        FileNotFoundError: if the path does not exist
        PIL.UnidentifiedImageError: if Pillow cannot decode the file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with Image.open(path) as image:
        buffer = buffer_from_image(image)

    logger.debug("Loaded %s (%dx%d)", path, buffer.width, buffer.height)
    return buffer


def _font_candidates(font: str) -> List[str]:
    candidates = [font, f"{font}.ttf", f"{font.replace(' ', '')}.ttf"]
    return candidates + [name for name in FALLBACK_FONTS if name not in candidates]


def load_font(font: str = DEFAULT_FONT, size: int = 150) -> ImageFont.ImageFont:
    """
    Load a TrueType font by family name or file path.

    Falls back through common heavy fonts, then Pillow's built-in font.
    """
    for name in _font_candidates(font):
        try:
            loaded = ImageFont.truetype(name, size)
        except (OSError, IOError):
            continue
        if name != font:
            logger.debug("Font %r not found, using %r", font, name)
        return loaded

    logger.warning("No TrueType font found for %r, using Pillow's default font", font)
    return ImageFont.load_default(size=size)


def render_text_image(
    text: str,
    font: str = DEFAULT_FONT,
    font_size: int = 150,
    bold: bool = True,
) -> Image.Image:
    """
    Draw text in black, centered on a white canvas.

    The canvas is sized from the text length: roughly 0.7 x font_size per
    character plus one font_size of margin, and 1.5 x font_size tall.
    """
    width = math.ceil(len(text) * font_size * 0.7) + font_size
    height = math.ceil(font_size * 1.5)

    image = Image.new('RGBA', (width, height), color=(255, 255, 255, 255))
    draw = ImageDraw.Draw(image)

    # Emboldened with a stroke; most fallback faces are already heavy
    stroke = max(1, font_size // 40) if bold else 0
    draw.text(
        (width / 2, height / 2),
        text,
        fill=(0, 0, 0, 255),
        font=load_font(font, font_size),
        anchor='mm',
        stroke_width=stroke,
        stroke_fill=(0, 0, 0, 255),
    )

    return image


def text_to_buffer(text: str, font: str = DEFAULT_FONT, font_size: int = 150, bold: bool = True) -> PixelBuffer:
    """Rasterize text into a PixelBuffer."""
    return buffer_from_image(render_text_image(text, font=font, font_size=font_size, bold=bold))


def generate_test_pattern(width: int = 400, height: int = 400) -> PixelBuffer:
    """
    Generate a lit sphere on a white background.

    The sphere has radius 0.4 x the shorter side and is lit from the
    upper left; brightness is Lambertian, clamped to 0-255.
    """
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    radius = min(width, height) * 0.4

    dx = xs - width / 2
    dy = ys - height / 2
    dist = np.sqrt(dx * dx + dy * dy)
    inside = dist < radius

    normal_z = np.sqrt(np.clip(1 - (dist / radius) ** 2, 0.0, None))
    light_x, light_y, light_z = -0.5, -0.5, 0.7
    dot = (dx / radius) * light_x + (dy / radius) * light_y + normal_z * light_z
    brightness = np.clip(dot * 255, 0, 255)

    gray = np.where(inside, brightness, 255).astype(np.uint8)

    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., :3] = gray[..., None]
    pixels[..., 3] = 255
    return PixelBuffer.from_array(pixels)
