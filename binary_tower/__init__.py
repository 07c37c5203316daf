"""
Binary tower field arithmetic.

A family of characteristic-2 fields built recursively: the field of height h
is a quadratic extension of the field of height h-1, down to GF(2) at
height 0. Height h has 2^(2^h) elements.

This package provides:
- GF(2) (BinaryField) and the tower levels above it (tower_field / TowerField[h])
- Karatsuba multiplication, exponentiation and inversion at every height
- Integer, bit, byte and numpy bit-array codecs
- The split/join isomorphism between a level and pairs of the level below
- Small-by-large multiplication across heights
- Montgomery batch inversion
- An isomorphism to galois polynomial-basis fields

Usage:
    from binary_tower import Tower8b, Tower32b, mul_mixed, split, join

    a = Tower8b.from_int(160)
    b = Tower8b.from_int(23)
    assert a * b == Tower8b.from_int(90)
    assert (a / b) * (a * b) == a ** 2

    low, high = split(Tower32b.from_int(0xDEADBEEF))
    big = mul_mixed(a, Tower32b.from_int(0xDEADBEEF))  # a Tower32b
"""

from .errors import (
    TowerFieldError,
    NoInverseError,
    HeightError,
)

from .config import (
    TowerConfig,
    get_config,
    resolve_config,
    use_config,
)

from .field import FieldElement, order_prime_factors
from .binary_field import BinaryField
from .tower import (
    TowerField,
    tower_field,
    tower_element,
    Tower2b,
    Tower4b,
    Tower8b,
    Tower16b,
    Tower32b,
    Tower64b,
    Tower128b,
)

from .codec import (
    from_int,
    to_int,
    from_bits,
    to_bits,
    from_bytes,
    to_bytes,
    to_bit_array,
    from_bit_array,
    to_bit_matrix,
    num_digits,
    min_height,
)

from .embedding import (
    split,
    join,
    embed,
    downcast,
    is_in_subfield,
)

from .cross_height import (
    small_by_large_mul,
    mul_into_receiver,
    mul_mixed,
)

from .batch import batch_inverse

from .isomorphism import (
    GaloisIsomorphism,
    conjugates,
    minimal_polynomial,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "TowerFieldError",
    "NoInverseError",
    "HeightError",
    # Config
    "TowerConfig",
    "get_config",
    "resolve_config",
    "use_config",
    # Fields
    "FieldElement",
    "order_prime_factors",
    "BinaryField",
    "TowerField",
    "tower_field",
    "tower_element",
    "Tower2b",
    "Tower4b",
    "Tower8b",
    "Tower16b",
    "Tower32b",
    "Tower64b",
    "Tower128b",
    # Codec
    "from_int",
    "to_int",
    "from_bits",
    "to_bits",
    "from_bytes",
    "to_bytes",
    "to_bit_array",
    "from_bit_array",
    "to_bit_matrix",
    "num_digits",
    "min_height",
    # Embedding
    "split",
    "join",
    "embed",
    "downcast",
    "is_in_subfield",
    # Cross-height
    "small_by_large_mul",
    "mul_into_receiver",
    "mul_mixed",
    # Batch
    "batch_inverse",
    # Galois
    "GaloisIsomorphism",
    "conjugates",
    "minimal_polynomial",
]
