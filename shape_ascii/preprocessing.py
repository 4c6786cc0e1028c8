"""
Sampling Vector Preprocessing

Per-cell adjustments applied between sampling and matching:
- Inversion (dark pixels become ink)
- Contrast enhancement relative to the cell's own peak
"""

from typing import List, Sequence


def invert_vector(vector: Sequence[float]) -> List[float]:
    """Replace each component v with 1 - v."""
    return [1.0 - v for v in vector]


def enhance_contrast(vector: Sequence[float], exponent: float) -> List[float]:
    """
    Sharpen the contrast inside one sampling vector.

    Each component is normalized by the vector's maximum, raised to
    `exponent` and scaled back by that maximum. The peak keeps its value,
    lower components are pulled toward 0 (for exponent > 1), so the cell's
    overall brightness is preserved while its shape gets crisper.

    Args:
        vector: Sampling vector
        exponent: Contrast exponent (> 0; 1.0 leaves the vector unchanged)

    Returns:
        Enhanced vector. An all-zero vector is returned unchanged.
    """
    peak = max(vector)
    if peak == 0:
        return list(vector)

    return [(v / peak) ** exponent * peak for v in vector]
