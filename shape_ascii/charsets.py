"""
Character Shape Library

Hand-tuned 6D shape signatures for printable ASCII characters.

Each signature approximates where a glyph puts its ink across six regions
of a character cell, in the fixed order:

    top-left, top-right, mid-left, mid-right, bottom-left, bottom-right

Values are in [0, 1]; higher means denser ink. The blank space carries the
all-zero signature and '@' is the heaviest glyph, used for near-solid cells.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple
import numpy as np


SIGNATURE_SIZE = 6


@dataclass(frozen=True)
class CharacterShape:
    """A printable character paired with its 6D ink signature."""
    character: str
    signature: Tuple[float, ...]


def _shape(character: str, *signature: float) -> CharacterShape:
    return CharacterShape(character, tuple(signature))


# ============================================================================
# SHAPE CATALOG
# ============================================================================

# Order matters: equidistant matches resolve to the earliest entry.
CHARACTER_SHAPES: Tuple[CharacterShape, ...] = (
    _shape(' ', 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    # Punctuation and thin marks
    _shape('.', 0.0, 0.0, 0.0, 0.0, 0.2, 0.0),
    _shape("'", 0.3, 0.0, 0.0, 0.0, 0.0, 0.0),
    _shape('`', 0.0, 0.3, 0.0, 0.0, 0.0, 0.0),
    _shape(',', 0.0, 0.0, 0.0, 0.0, 0.0, 0.3),
    _shape(':', 0.0, 0.0, 0.3, 0.0, 0.3, 0.0),
    _shape(';', 0.0, 0.0, 0.3, 0.0, 0.2, 0.3),
    # Bars and operators
    _shape('-', 0.0, 0.0, 0.8, 0.8, 0.0, 0.0),
    _shape('=', 0.0, 0.0, 0.8, 0.8, 0.8, 0.8),
    _shape('+', 0.0, 0.4, 0.8, 0.8, 0.0, 0.4),
    _shape('*', 0.3, 0.3, 0.5, 0.5, 0.3, 0.3),
    _shape('~', 0.0, 0.0, 0.6, 0.6, 0.0, 0.0),
    _shape('^', 0.4, 0.4, 0.0, 0.0, 0.0, 0.0),
    _shape('"', 0.4, 0.4, 0.0, 0.0, 0.0, 0.0),
    _shape('|', 0.4, 0.4, 0.4, 0.4, 0.4, 0.4),
    _shape('/', 0.0, 0.7, 0.4, 0.4, 0.7, 0.0),
    _shape('\\', 0.7, 0.0, 0.4, 0.4, 0.0, 0.7),
    # Brackets
    _shape('(', 0.0, 0.5, 0.5, 0.0, 0.0, 0.5),
    _shape(')', 0.5, 0.0, 0.0, 0.5, 0.5, 0.0),
    _shape('[', 0.5, 0.5, 0.5, 0.0, 0.5, 0.5),
    _shape(']', 0.5, 0.5, 0.0, 0.5, 0.5, 0.5),
    _shape('{', 0.3, 0.5, 0.6, 0.0, 0.3, 0.5),
    _shape('}', 0.5, 0.3, 0.0, 0.6, 0.5, 0.3),
    _shape('<', 0.0, 0.5, 0.5, 0.0, 0.0, 0.5),
    _shape('>', 0.5, 0.0, 0.0, 0.5, 0.5, 0.0),
    # Narrow letters
    _shape('i', 0.3, 0.0, 0.5, 0.0, 0.5, 0.0),
    _shape('l', 0.5, 0.0, 0.5, 0.0, 0.5, 0.5),
    _shape('I', 0.5, 0.5, 0.4, 0.4, 0.5, 0.5),
    _shape('!', 0.4, 0.0, 0.4, 0.0, 0.3, 0.0),
    _shape('t', 0.5, 0.5, 0.5, 0.0, 0.3, 0.4),
    _shape('f', 0.3, 0.5, 0.5, 0.3, 0.5, 0.0),
    _shape('r', 0.0, 0.0, 0.5, 0.5, 0.5, 0.0),
    # Lowercase, x-height only
    _shape('n', 0.0, 0.0, 0.6, 0.6, 0.5, 0.5),
    _shape('u', 0.0, 0.0, 0.5, 0.5, 0.5, 0.5),
    _shape('v', 0.0, 0.0, 0.5, 0.5, 0.3, 0.3),
    _shape('x', 0.0, 0.0, 0.6, 0.6, 0.6, 0.6),
    _shape('z', 0.0, 0.0, 0.6, 0.6, 0.6, 0.6),
    _shape('c', 0.0, 0.0, 0.5, 0.4, 0.5, 0.4),
    _shape('o', 0.0, 0.0, 0.5, 0.5, 0.5, 0.5),
    _shape('a', 0.0, 0.0, 0.5, 0.6, 0.5, 0.6),
    _shape('e', 0.0, 0.0, 0.6, 0.5, 0.5, 0.4),
    _shape('s', 0.0, 0.0, 0.5, 0.4, 0.4, 0.5),
    # Round capitals
    _shape('J', 0.4, 0.5, 0.0, 0.5, 0.5, 0.4),
    _shape('L', 0.5, 0.0, 0.5, 0.0, 0.5, 0.5),
    _shape('C', 0.4, 0.5, 0.5, 0.0, 0.4, 0.5),
    _shape('U', 0.5, 0.5, 0.5, 0.5, 0.4, 0.4),
    _shape('O', 0.4, 0.4, 0.5, 0.5, 0.4, 0.4),
    _shape('0', 0.5, 0.5, 0.5, 0.5, 0.5, 0.5),
    _shape('Q', 0.4, 0.4, 0.5, 0.5, 0.5, 0.6),
    _shape('Y', 0.5, 0.5, 0.3, 0.3, 0.3, 0.0),
    _shape('X', 0.6, 0.6, 0.4, 0.4, 0.6, 0.6),
    _shape('Z', 0.6, 0.6, 0.4, 0.4, 0.6, 0.6),
    # Wide lowercase and ascenders
    _shape('m', 0.0, 0.0, 0.7, 0.7, 0.6, 0.6),
    _shape('w', 0.0, 0.0, 0.6, 0.6, 0.7, 0.7),
    _shape('q', 0.0, 0.0, 0.6, 0.6, 0.5, 0.6),
    _shape('p', 0.0, 0.0, 0.6, 0.6, 0.6, 0.5),
    _shape('d', 0.0, 0.5, 0.5, 0.5, 0.5, 0.5),
    _shape('b', 0.5, 0.0, 0.5, 0.5, 0.5, 0.5),
    _shape('k', 0.5, 0.0, 0.5, 0.5, 0.5, 0.5),
    _shape('h', 0.5, 0.0, 0.5, 0.5, 0.5, 0.5),
    # Capitals
    _shape('A', 0.4, 0.4, 0.6, 0.6, 0.5, 0.5),
    _shape('V', 0.5, 0.5, 0.5, 0.5, 0.3, 0.3),
    _shape('T', 0.6, 0.6, 0.3, 0.3, 0.3, 0.0),
    _shape('N', 0.6, 0.6, 0.6, 0.6, 0.6, 0.6),
    _shape('H', 0.5, 0.5, 0.6, 0.6, 0.5, 0.5),
    _shape('K', 0.5, 0.5, 0.6, 0.5, 0.5, 0.5),
    _shape('D', 0.6, 0.5, 0.6, 0.5, 0.6, 0.5),
    _shape('P', 0.6, 0.5, 0.6, 0.5, 0.5, 0.0),
    _shape('R', 0.6, 0.5, 0.6, 0.5, 0.5, 0.5),
    _shape('B', 0.6, 0.5, 0.6, 0.5, 0.6, 0.5),
    _shape('E', 0.6, 0.6, 0.6, 0.4, 0.6, 0.6),
    _shape('F', 0.6, 0.6, 0.6, 0.4, 0.5, 0.0),
    _shape('G', 0.5, 0.6, 0.5, 0.4, 0.5, 0.6),
    _shape('S', 0.5, 0.6, 0.5, 0.5, 0.6, 0.5),
    # Heavy glyphs
    _shape('#', 0.7, 0.7, 0.8, 0.8, 0.7, 0.7),
    _shape('%', 0.7, 0.5, 0.5, 0.5, 0.5, 0.7),
    _shape('&', 0.5, 0.5, 0.6, 0.6, 0.6, 0.7),
    _shape('M', 0.7, 0.7, 0.6, 0.6, 0.6, 0.6),
    _shape('W', 0.6, 0.6, 0.6, 0.6, 0.7, 0.7),
    _shape('8', 0.6, 0.6, 0.6, 0.6, 0.6, 0.6),
    _shape('$', 0.6, 0.6, 0.6, 0.6, 0.6, 0.6),
    _shape('@', 0.8, 0.8, 0.8, 0.8, 0.8, 0.7),
)

# Edge and line friendly subset, for line drawings and text banners
STRUCTURAL_CHARACTERS = " .'`,:;-=+*~^|/\\()[]{}<>#@"


@dataclass(frozen=True)
class ShapeLibrary:
    """
    An immutable catalog of character shapes.

    Attributes:
        name: Identifier for the library
        shapes: Catalog entries in match order
        characters: Characters of the catalog, in match order
        signatures: N x 6 float array of signatures, row i belongs to characters[i]
    """
    name: str
    shapes: Tuple[CharacterShape, ...]
    characters: Tuple[str, ...] = field(init=False, repr=False)
    signatures: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.shapes:
            raise ValueError(f"Shape library '{self.name}' is empty")

        for shape in self.shapes:
            if len(shape.signature) != SIGNATURE_SIZE:
                raise ValueError(
                    f"Signature for {shape.character!r} has {len(shape.signature)} "
                    f"components, expected {SIGNATURE_SIZE}"
                )
            if any(v < 0.0 or v > 1.0 for v in shape.signature):
                raise ValueError(f"Signature for {shape.character!r} is outside [0, 1]")

        if not any(all(v == 0.0 for v in shape.signature) for shape in self.shapes):
            raise ValueError(f"Shape library '{self.name}' has no blank (all-zero) entry")

        signatures = np.array([shape.signature for shape in self.shapes], dtype=np.float64)
        signatures.setflags(write=False)

        # Frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, 'characters', tuple(s.character for s in self.shapes))
        object.__setattr__(self, 'signatures', signatures)

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    @property
    def blank(self) -> str:
        """The first character with an all-zero signature."""
        for shape in self.shapes:
            if not any(shape.signature):
                return shape.character
        return ' '

    @property
    def heaviest(self) -> str:
        """The character with the most total ink (first one on ties)."""
        return self.characters[int(np.argmax(self.signatures.sum(axis=1)))]

    def get_signature(self, char: str) -> Tuple[float, ...]:
        """Get the signature of a character in this library."""
        for shape in self.shapes:
            if shape.character == char:
                return shape.signature
        raise KeyError(char)

    def subset(self, name: str, characters: Sequence[str]) -> 'ShapeLibrary':
        """Build a library from the entries whose character is in `characters`, keeping order."""
        wanted = set(characters)
        return ShapeLibrary(name, tuple(s for s in self.shapes if s.character in wanted))


# ============================================================================
# LIBRARY FACTORY
# ============================================================================

_LIBRARY_REGISTRY: Dict[str, ShapeLibrary] = {}


def get_shape_library(name: str = "ascii_shapes") -> ShapeLibrary:
    """
    Get a shape library by name.

    Available libraries:
        - ascii_shapes: the full printable catalog
        - ascii_structural: edge/line-friendly subset

    Libraries are built once and shared by every caller.

    Raises:
        ValueError: if the name is unknown
    """
    if name not in _LIBRARY_REGISTRY:
        if name == "ascii_shapes":
            library = ShapeLibrary(name, CHARACTER_SHAPES)
        elif name == "ascii_structural":
            library = get_shape_library("ascii_shapes").subset(name, STRUCTURAL_CHARACTERS)
        else:
            raise ValueError(f"Unknown shape library: {name}. Available: {list_shape_libraries()}")
        _LIBRARY_REGISTRY[name] = library

    return _LIBRARY_REGISTRY[name]


def list_shape_libraries() -> List[str]:
    """List all available shape library names."""
    return [
        "ascii_shapes",
        "ascii_structural",
    ]
