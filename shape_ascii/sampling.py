"""
Cell Sampling

Turns one rectangular cell of an RGBA pixel buffer into a 6D sampling
vector. Six disks are placed on a 2 x 3 grid inside the cell and the mean
luminance under each disk becomes one component, in the same region order
as the shape signatures in charsets.py.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import List, Optional, Tuple
import math
import numpy as np


# Relative (x, y) centers of the sample disks, row by row
SAMPLE_POSITIONS: Tuple[Tuple[float, float], ...] = (
    (0.25, 0.17), (0.75, 0.17),  # top
    (0.25, 0.50), (0.75, 0.50),  # middle
    (0.25, 0.83), (0.75, 0.83),  # bottom
)

# Disk radius as a fraction of the shorter cell side
RADIUS_FACTOR = 0.15

# Perceptual luminance weights for R, G, B, in thousandths (0.299, 0.587, 0.114)
LUMA_WEIGHTS = (299, 587, 114)
_LUMA_SCALE = 1000 * 255


@dataclass(frozen=True)
class PixelBuffer:
    """
    Decoded image pixels, row-major RGBA with 4 bytes per pixel.

    Alpha is carried but never sampled. The buffer is read-only; the
    luminance plane is computed on first use and reused afterwards.
    """
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid buffer size {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA buffer for {self.width}x{self.height} needs {expected} bytes, got {len(self.data)}"
            )

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> 'PixelBuffer':
        """Build a buffer from an H x W x 4 uint8 array."""
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an H x W x 4 array, got shape {pixels.shape}")
        height, width = pixels.shape[:2]
        return cls(width, height, np.ascontiguousarray(pixels, dtype=np.uint8).tobytes())

    @property
    def pixels(self) -> np.ndarray:
        """H x W x 4 uint8 view of the data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    @cached_property
    def luminance(self) -> np.ndarray:
        """H x W luminance plane in [0, 1]."""
        return luminance(self.pixels)

    def complement(self) -> 'PixelBuffer':
        """Copy with every color channel replaced by 255 - value; alpha is kept."""
        pixels = self.pixels.copy()
        pixels[..., :3] = 255 - pixels[..., :3]
        return PixelBuffer.from_array(pixels)


def luminance(pixels: np.ndarray) -> np.ndarray:
    """
    Compute per-pixel luminance of an RGB(A) array.

    Args:
        pixels: H x W x 3 or H x W x 4 array with channels in 0-255

    Returns:
        H x W float64 array in [0, 1]
    """
    rgb = pixels[..., :3].astype(np.int64)
    r_weight, g_weight, b_weight = LUMA_WEIGHTS
    # integer weights keep white at exactly 1.0
    return (r_weight * rgb[..., 0] + g_weight * rgb[..., 1] + b_weight * rgb[..., 2]) / _LUMA_SCALE


def _disk_mean(plane: np.ndarray, cx: float, cy: float, radius: float) -> Optional[float]:
    """Mean of the pixels within `radius` of (cx, cy), or None if the disk holds no pixel."""
    height, width = plane.shape

    # floor the lower bounds, ceil the upper ones, then clamp
    min_y = max(0, math.floor(cy - radius))
    max_y = min(height - 1, math.ceil(cy + radius))
    min_x = max(0, math.floor(cx - radius))
    max_x = min(width - 1, math.ceil(cx + radius))

    if min_x > max_x or min_y > max_y:
        return None

    ys = np.arange(min_y, max_y + 1, dtype=np.float64)[:, None]
    xs = np.arange(min_x, max_x + 1, dtype=np.float64)[None, :]
    inside = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius ** 2

    if not inside.any():
        return None

    return float(plane[min_y:max_y + 1, min_x:max_x + 1][inside].mean())


def sample_circle(plane: np.ndarray, cx: float, cy: float, radius: float) -> float:
    """
    Average luminance inside a disk.

    Pixel (x, y) is treated as sitting at integer coordinates (x, y).
    Returns 0.0 when no pixel falls inside the disk.
    """
    value = _disk_mean(plane, cx, cy, radius)
    return 0.0 if value is None else value


def sample_cell(
    buffer: PixelBuffer,
    cell_x: float,
    cell_y: float,
    cell_width: float,
    cell_height: float,
) -> List[float]:
    """
    Sample one cell of a buffer into a 6D vector.

    Args:
        buffer: Source pixels
        cell_x, cell_y: Top-left corner of the cell in (fractional) pixels
        cell_width, cell_height: Cell size in (fractional) pixels

    Returns:
        [top-left, top-right, mid-left, mid-right, bottom-left, bottom-right]
        luminance means in [0, 1]. A disk that holds no pixel takes the pixel
        under its center when the cell is at least one pixel on each side,
        and 0.0 in smaller cells.
    """
    if buffer.width == 0 or buffer.height == 0 or cell_width <= 0 or cell_height <= 0:
        return [0.0] * len(SAMPLE_POSITIONS)

    plane = buffer.luminance
    radius = min(cell_width, cell_height) * RADIUS_FACTOR

    vector = []
    for rel_x, rel_y in SAMPLE_POSITIONS:
        cx = cell_x + rel_x * cell_width
        cy = cell_y + rel_y * cell_height
        value = _disk_mean(plane, cx, cy, radius)
        if value is None:
            if cell_width >= 1 and cell_height >= 1:
                # Disk misses the pixel grid: take the pixel under the center
                px = min(max(math.floor(cx), 0), buffer.width - 1)
                py = min(max(math.floor(cy), 0), buffer.height - 1)
                value = float(plane[py, px])
            else:
                # Sub-pixel cell
                value = 0.0
        vector.append(value)

    return vector
