"""Isomorphism between a tower field and a galois polynomial-basis field.

The tower field of height h and galois.GF(2^(2^h)) are the same field up to
a change of basis. Picking a tower element g whose minimal polynomial over
GF(2) has full degree BITS, galois builds GF(2^BITS) with that polynomial as
its irreducible polynomial, so g corresponds to x. Coordinates then change
between the tower's monomial basis and the power basis 1, g, ..., g^(BITS-1)
with a GF(2) matrix.

Example:
    iso = GaloisIsomorphism(3)
    a, b = Tower8b.from_int(160), Tower8b.from_int(23)
    assert iso.to_galois(a * b) == iso.to_galois(a) * iso.to_galois(b)
"""

import logging
from typing import List, Optional

import galois
import numpy as np

from . import codec
from .config import TowerConfig
from .errors import HeightError
from .field import FieldElement
from .tower import tower_field

_logger = logging.getLogger(__name__)

GF2 = galois.GF(2)
"""Prime field GF(2) used for coordinates and minimal polynomials."""


def conjugates(elem: FieldElement) -> List[FieldElement]:
    """Distinct Frobenius conjugates elem, elem^2, elem^4, ..."""
    result = [elem]
    c = elem.square()
    while c != elem:
        result.append(c)
        c = c.square()
    return result


def minimal_polynomial(elem: FieldElement) -> galois.Poly:
    """Minimal polynomial of elem over GF(2).

    Computed as the product of (X + c) over the conjugates c of elem, whose
    coefficients are fixed by squaring and so lie in GF(2).
    """
    # Ascending degree.
    coeffs = [elem.ONE]
    for c in conjugates(elem):
        shifted = [elem.ZERO] + coeffs
        scaled = [coeff * c for coeff in coeffs] + [elem.ZERO]
        coeffs = [s + t for s, t in zip(shifted, scaled)]

    descending = []
    for coeff in reversed(coeffs):
        if coeff == elem.ONE:
            descending.append(1)
        elif not coeff:
            descending.append(0)
        else:
            raise ValueError(f"Minimal polynomial coefficient {coeff!r} of {elem!r} is not in GF(2)")
    return galois.Poly(descending, field=GF2)


class GaloisIsomorphism:
    """Field isomorphism between tower_field(height) and a galois GF(2^BITS).

    Attributes:
        tower: Tower field class of the requested height
        generator: Tower element mapped to x in the galois field
        irreducible_poly: Minimal polynomial of generator over GF(2)
        field: galois field class GF(2^BITS) built on irreducible_poly
    """

    def __init__(
        self,
        height: int,
        generator: Optional[FieldElement] = None,
        config: Optional[TowerConfig] = None,
    ) -> None:
        """Build the isomorphism.

        Args:
            height: Tower height, at least 1
            generator: Element to map to x; defaults to the tower's
                multiplicative generator. Must not lie in a proper subfield.
            config: Bounds height through max_height; defaults to the
                active config.

        Raises:
            HeightError: If height is 0 or generator has another height.
            ValueError: If generator lies in a proper subfield.
        """
        if height < 1:
            raise HeightError(f"GaloisIsomorphism needs height >= 1, got {height}")
        self.tower = tower_field(height, config)
        if generator is None:
            generator = self.tower.multiplicative_generator()
        elif type(generator) is not self.tower:
            raise HeightError(f"Generator must be a {self.tower.__name__}, got {type(generator).__name__}")
        self.generator = generator

        self.irreducible_poly = minimal_polynomial(generator)
        if self.irreducible_poly.degree != self.tower.BITS:
            raise ValueError(
                f"{generator!r} lies in a proper subfield: minimal polynomial has degree "
                f"{self.irreducible_poly.degree}, expected {self.tower.BITS}"
            )
        self.field = galois.GF(2**self.tower.BITS, irreducible_poly=self.irreducible_poly)

        # Column j holds the tower coordinates of generator^j.
        powers = [self.tower.ONE]
        for _ in range(1, self.tower.BITS):
            powers.append(powers[-1] * generator)
        self._power_to_tower = GF2(codec.to_bit_matrix(powers))
        self._tower_to_power = np.linalg.inv(self._power_to_tower)

        _logger.debug(
            "Built isomorphism %s -> GF(2^%d) with irreducible polynomial %s",
            self.tower.__name__, self.tower.BITS, self.irreducible_poly,
        )

    def to_galois(self, elem: FieldElement):
        """Image of a tower element in the galois field."""
        if type(elem) is not self.tower:
            raise HeightError(f"Expected a {self.tower.__name__}, got {type(elem).__name__}")
        coords = self._tower_to_power @ GF2(codec.to_bit_matrix([elem])[:, 0])
        value = 0
        for j, c in enumerate(coords):
            value |= int(c) << j
        return self.field(value)

    def from_galois(self, x) -> FieldElement:
        """Tower element corresponding to a galois field element or its integer."""
        value = int(self.field(x))
        coords = GF2([(value >> j) & 1 for j in range(self.tower.BITS)])
        bits = self._power_to_tower @ coords
        result = 0
        for i, b in enumerate(bits):
            result |= int(b) << i
        return codec.from_int(self.tower, result)
