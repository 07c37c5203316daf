"""The base field GF(2), height 0 of the tower.

Addition is XOR and multiplication is AND. The two values are interned, so
BinaryField(1) is BinaryField.ONE.
"""

from .cross_height import mul_into_receiver
from .errors import NoInverseError
from .field import FieldElement


class BinaryField(FieldElement):
    """Element of GF(2)."""

    __slots__ = ("_bit",)

    HEIGHT = 0
    BITS = 1
    ORDER = 2
    SUBFIELD = None

    def __new__(cls, bit: int = 0) -> "BinaryField":
        if bit == 1:
            return cls.ONE
        if bit == 0:
            return cls.ZERO
        raise ValueError(f"BinaryField takes 0 or 1, got {bit!r}")

    def __setattr__(self, name, value):
        raise AttributeError("BinaryField is immutable")

    def __reduce__(self):
        return (BinaryField, (self._bit,))

    def __copy__(self) -> "BinaryField":
        return self

    def __deepcopy__(self, memo) -> "BinaryField":
        return self

    def __bool__(self) -> bool:
        return self._bit == 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, BinaryField):
            return NotImplemented
        return self._bit == other._bit

    def __hash__(self) -> int:
        return hash((0, self._bit))

    def __repr__(self) -> str:
        return "BinaryField.ONE" if self._bit else "BinaryField.ZERO"

    def __add__(self, other):
        if not isinstance(other, BinaryField):
            return NotImplemented
        return BinaryField.ONE if self._bit ^ other._bit else BinaryField.ZERO

    def __mul__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        if other.HEIGHT > 0:
            return mul_into_receiver(self, other)
        return BinaryField.ONE if self._bit & other._bit else BinaryField.ZERO

    def square(self) -> "BinaryField":
        return self

    def inverse(self) -> "BinaryField":
        if not self._bit:
            raise NoInverseError("BinaryField: zero has no inverse")
        return self

    def _mul_tau(self) -> "BinaryField":
        # tau_{-1} is the identity.
        return self


def _make(bit: int) -> BinaryField:
    elem = object.__new__(BinaryField)
    object.__setattr__(elem, "_bit", bit)
    return elem


BinaryField.ZERO = _make(0)
BinaryField.ONE = _make(1)
BinaryField.TAU = BinaryField.ONE
