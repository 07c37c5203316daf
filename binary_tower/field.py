"""Operations shared by every height of the binary tower.

FieldElement is the common base of BinaryField (height 0) and TowerField
(height >= 1). Subclasses provide addition, multiplication, truthiness and
the class constants below; everything derived from those lives here.

Class constants every concrete field class carries:
    HEIGHT:   tower height h
    BITS:     number of GF(2) coefficients, 2^h
    ORDER:    number of field elements, 2^(2^h)
    SUBFIELD: field class of height h - 1 (None at height 0)
    ZERO, ONE: additive and multiplicative identities
    TAU:      the generator adjoined at this height (ONE at height 0)
"""

import operator
import random as _random
from functools import lru_cache, reduce
from typing import ClassVar, Iterable, Optional, Tuple

from . import codec
from .errors import HeightError, NoInverseError

# Prime factors of the Fermat numbers F_i = 2^(2^i) + 1.
# ORDER - 1 = 2^(2^h) - 1 = F_0 * F_1 * ... * F_(h-1).
_FERMAT_PRIME_FACTORS = {
    0: (3,),
    1: (5,),
    2: (17,),
    3: (257,),
    4: (65537,),
    5: (641, 6700417),
    6: (274177, 67280421310721),
    7: (59649589127497217, 5704689200685129054721),
    8: (1238926361552897, 93461639715357977769163558199606896584051237541638188580280321),
}


def order_prime_factors(height: int) -> Tuple[int, ...]:
    """Distinct primes dividing the multiplicative group order 2^(2^h) - 1."""
    if not 0 <= height <= len(_FERMAT_PRIME_FACTORS):
        raise HeightError(
            f"Group order of height {height} is not factorised; "
            f"supported heights are 0 to {len(_FERMAT_PRIME_FACTORS)}"
        )
    factors = []
    for i in range(height):
        factors.extend(_FERMAT_PRIME_FACTORS[i])
    return tuple(factors)


class FieldElement:
    """Base class for tower field elements of any height."""

    __slots__ = ()

    HEIGHT: ClassVar[int]
    BITS: ClassVar[int]
    ORDER: ClassVar[int]
    SUBFIELD: ClassVar[Optional[type]]
    ZERO: ClassVar["FieldElement"]
    ONE: ClassVar["FieldElement"]
    TAU: ClassVar["FieldElement"]

    # --- Codec ---

    @classmethod
    def from_int(cls, value: int) -> "FieldElement":
        """Decode an unsigned integer, truncating it to BITS bits."""
        return codec.from_int(cls, value)

    @classmethod
    def from_bits(cls, bits) -> "FieldElement":
        """Decode coefficients given most significant first."""
        return codec.from_bits(cls, bits)

    @classmethod
    def from_bytes(cls, data: bytes, byteorder: str = "little") -> "FieldElement":
        return codec.from_bytes(cls, data, byteorder)

    def to_int(self) -> int:
        return codec.to_int(self)

    def to_bits(self) -> list:
        return codec.to_bits(self)

    def to_bytes(self, byteorder: str = "little") -> bytes:
        return codec.to_bytes(self, byteorder)

    def __int__(self) -> int:
        return codec.to_int(self)

    def __repr__(self) -> str:
        hexlen = (self.BITS + 3) // 4
        return f"{type(self).__name__}({codec.to_int(self):#0{hexlen + 2}x})"

    def __str__(self) -> str:
        return format(codec.to_int(self), "#x")

    # --- Arithmetic ---

    def __sub__(self, other):
        # Characteristic 2: subtraction is addition.
        return self.__add__(other)

    def __neg__(self) -> "FieldElement":
        return self

    def is_zero(self) -> bool:
        return not self

    def square(self) -> "FieldElement":
        return self * self

    def pow(self, exponent: int) -> "FieldElement":
        """Square-and-multiply exponentiation, most significant bit first.

        Negative exponents raise the inverse to -exponent. For a nonzero base
        the exponent is first reduced modulo ORDER - 1, the order of the
        multiplicative group.
        """
        exponent = operator.index(exponent)
        if exponent < 0:
            return self.inverse().pow(-exponent)
        if exponent == 0:
            return self.ONE
        if not self:
            return self
        exponent %= self.ORDER - 1
        result = self.ONE
        for i in reversed(range(exponent.bit_length())):
            result = result.square()
            if (exponent >> i) & 1:
                result = result * self
        return result

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def inverse(self) -> "FieldElement":
        """Multiplicative inverse, computed as self^(ORDER - 2).

        Raises:
            NoInverseError: If self is zero.
        """
        if not self:
            raise NoInverseError(f"{type(self).__name__}: zero has no inverse")
        return self.pow(self.ORDER - 2)

    def try_inverse(self) -> Optional["FieldElement"]:
        """Multiplicative inverse, or None for zero."""
        if not self:
            return None
        return self.inverse()

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self * other.inverse()

    def __mod__(self, other):
        # Always zero for a nonzero divisor in a field.
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self - (self / other) * other

    @classmethod
    def sum(cls, values: Iterable["FieldElement"]) -> "FieldElement":
        return reduce(operator.add, values, cls.ZERO)

    @classmethod
    def product(cls, values: Iterable["FieldElement"]) -> "FieldElement":
        return reduce(operator.mul, values, cls.ONE)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "FieldElement":
        """Uniformly random element drawn from rng (default: module random)."""
        rng = rng if rng is not None else _random
        return codec.from_int(cls, rng.getrandbits(cls.BITS))

    # --- Multiplicative group ---

    def is_primitive(self) -> bool:
        """True if self generates the multiplicative group of its field."""
        if not self:
            return False
        group_order = self.ORDER - 1
        return all(self.pow(group_order // p) != self.ONE for p in order_prime_factors(self.HEIGHT))

    @classmethod
    def multiplicative_generator(cls) -> "FieldElement":
        """Smallest generator of the multiplicative group not in the subfield."""
        return _find_generator(cls)


@lru_cache(maxsize=None)
def _find_generator(cls) -> FieldElement:
    # Values below 2^(BITS/2) have a zero high half and lie in the subfield.
    for value in range(1 << (cls.BITS // 2), cls.ORDER):
        g = codec.from_int(cls, value)
        if g.is_primitive():
            return g
    raise ValueError(f"No multiplicative generator found for {cls.__name__}")
