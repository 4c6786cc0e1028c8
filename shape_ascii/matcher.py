"""
Nearest-Signature Character Matcher

Maps a 6D sampling vector to the catalog character whose signature is
closest in Euclidean distance.

Vectors are quantized to 5 bits per component (32 buckets) and packed into
a 30-bit integer key. Matching runs on the center of the key's bucket, so
the result depends only on the key and can be memoized without changing
the output: a MatchCache only ever saves the linear scan.
"""

from typing import Dict, Optional, Sequence, Tuple
import math
import numpy as np

from .charsets import SIGNATURE_SIZE, ShapeLibrary, get_shape_library


BITS = 5
LEVELS = 1 << BITS
_MASK = LEVELS - 1


def quantize(vector: Sequence[float]) -> Tuple[int, ...]:
    """Bucket each component: floor(v * 32), clamped to [0, 31]."""
    return tuple(min(_MASK, max(0, math.floor(v * LEVELS))) for v in vector)


def cache_key(vector: Sequence[float]) -> int:
    """Pack the quantized components into one integer, first component in the high bits."""
    key = 0
    for level in quantize(vector):
        key = (key << BITS) | level
    return key


def bucket_center(key: int, size: int = SIGNATURE_SIZE) -> np.ndarray:
    """Decode a packed key into the vector at the center of its buckets."""
    levels = [(key >> (BITS * (size - 1 - i))) & _MASK for i in range(size)]
    return (np.array(levels, dtype=np.float64) + 0.5) / LEVELS


class MatchCache:
    """
    Memo of quantized key -> resolved character.

    Grows monotonically while a renderer uses it and may be cleared between
    runs. Not locked: share one instance per thread.
    """

    def __init__(self):
        self._entries: Dict[int, str] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: int) -> Optional[str]:
        char = self._entries.get(key)
        if char is None:
            self.misses += 1
        else:
            self.hits += 1
        return char

    def put(self, key: int, char: str):
        self._entries[key] = char

    def clear(self):
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> Dict[str, int]:
        return {'size': len(self._entries), 'hits': self.hits, 'misses': self.misses}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: int) -> bool:
        return key in self._entries


class CharacterMatcher:
    """
    Finds the best-matching character for sampling vectors.

    Example:
        >>> matcher = CharacterMatcher()
        >>> matcher.match([0.0] * 6)
        ' '
        >>> matcher.match([0.8] * 6)
        '@'
    """

    def __init__(
        self,
        library: Optional[ShapeLibrary] = None,
        cache: Optional[MatchCache] = None,
        use_cache: bool = True,
    ):
        """
        Args:
            library: Shape catalog to match against (default: ascii_shapes)
            cache: Memo to use; a fresh one is created if omitted
            use_cache: False forces a full scan for every vector
        """
        self.library = library or get_shape_library()
        self.cache = (cache if cache is not None else MatchCache()) if use_cache else None

    def nearest(self, vector: Sequence[float]) -> str:
        """
        Linear scan for the closest signature to an exact vector.

        Ties go to the entry that comes first in the catalog.
        """
        distances = np.linalg.norm(self.library.signatures - np.asarray(vector, dtype=np.float64), axis=1)
        return self.library.characters[int(np.argmin(distances))]

    def match(self, vector: Sequence[float]) -> str:
        """
        Resolve a sampling vector to a character.

        The result is the nearest character to the center of the vector's
        quantization bucket, not to the exact vector, so every vector that
        shares a cache key resolves the same way with or without the cache.
        Use nearest() for the exact-vector scan.

        Raises:
            ValueError: if the vector does not have 6 components
        """
        if len(vector) != SIGNATURE_SIZE:
            raise ValueError(f"Sampling vector must have {SIGNATURE_SIZE} components, got {len(vector)}")

        key = cache_key(vector)

        if self.cache is not None:
            char = self.cache.get(key)
            if char is not None:
                return char

        char = self.nearest(bucket_center(key))

        if self.cache is not None:
            self.cache.put(key, char)

        return char
