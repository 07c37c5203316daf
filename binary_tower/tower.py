"""Binary tower fields of height >= 1.

The field of height h is the quadratic extension of the field of height h-1
by a generator tau_(h-1) satisfying

    tau_(h-1)^2 = tau_(h-1) * tau_(h-2) + 1,    tau_(-1) = 1

so height 1 is GF(2)[tau_0] / (tau_0^2 + tau_0 + 1) = GF(4), and height h has
2^(2^h) elements. An element is a pair (low, high) of height h-1 elements
standing for low + high * tau_(h-1).

Each height is its own class, built once and cached:

    Tower8b = tower_field(3)        # also TowerField[3]
    a = Tower8b.from_int(160)
    b = Tower8b.from_int(23)
    assert a * b == Tower8b.from_int(90)
"""

import logging
import operator
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from . import codec
from .binary_field import BinaryField
from .config import TowerConfig, resolve_config
from .cross_height import mul_into_receiver
from .errors import HeightError
from .field import FieldElement

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False, slots=True)
class TowerField(FieldElement):
    """Element low + high * TAU of a tower field of height HEIGHT >= 1.

    Do not instantiate TowerField itself; use tower_field(height) or
    TowerField[height] to get the class for a given height.
    """
    low: FieldElement
    high: FieldElement

    def __class_getitem__(cls, height: int) -> type:
        return tower_field(height)

    def __reduce__(self):
        return (_restore, (self.HEIGHT, codec.to_int(self)))

    def __bool__(self) -> bool:
        return bool(self.low) or bool(self.high)

    # --- Arithmetic ---

    def __add__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.__class__(self.low + other.low, self.high + other.high)

    def __mul__(self, other):
        if other.__class__ is self.__class__:
            return self._mul(other)
        if not isinstance(other, FieldElement):
            return NotImplemented
        return mul_into_receiver(self, other)

    def _mul(self, other: "TowerField") -> "TowerField":
        # Karatsuba over the subfield: three recursive products, then
        # reduction by tau^2 = tau * tau' + 1.
        ll = self.low * other.low
        hh = self.high * other.high
        cross = (self.low + self.high) * (other.low + other.high)
        return self.__class__(ll + hh, cross + ll + hh + hh._mul_tau())

    def _mul_tau(self) -> "TowerField":
        # (a0 + a1 t) * t = a1 + (a0 + a1 t') t
        return self.__class__(self.high, self.low + self.high._mul_tau())

    def square(self) -> "TowerField":
        # Cross terms vanish in characteristic 2.
        low_sq = self.low.square()
        high_sq = self.high.square()
        return self.__class__(low_sq + high_sq, high_sq._mul_tau())

    # --- Embedding ---

    def split(self) -> Tuple[FieldElement, FieldElement]:
        """Decompose into (low, high) subfield elements."""
        return self.low, self.high

    @classmethod
    def join(cls, low: FieldElement, high: FieldElement) -> "TowerField":
        """Compose low + high * TAU from two subfield elements.

        Raises:
            HeightError: If either half is not an element of cls.SUBFIELD.
        """
        sub = getattr(cls, "SUBFIELD", None)
        if sub is None:
            raise HeightError("join() needs a concrete tower height, e.g. TowerField[3].join(...)")
        if type(low) is not sub or type(high) is not sub:
            raise HeightError(
                f"{cls.__name__}.join expects two {sub.__name__} halves, "
                f"got {type(low).__name__} and {type(high).__name__}"
            )
        return cls(low, high)


def tower_field(height: int, config: Optional[TowerConfig] = None) -> type:
    """Field class of the given height (BinaryField for height 0).

    Raises:
        HeightError: If height is negative or above max_height of config
            (default: the active config).
    """
    height = operator.index(height)
    max_height = resolve_config(config).max_height
    if not 0 <= height <= max_height:
        raise HeightError(f"Tower height must be in [0, {max_height}], got {height}")
    return _build_tower_field(height)


@lru_cache(maxsize=None)
def _build_tower_field(height: int) -> type:
    if height == 0:
        return BinaryField
    sub = _build_tower_field(height - 1)
    bits = 1 << height
    name = f"Tower{bits}b"
    cls = type(name, (TowerField,), {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "HEIGHT": height,
        "BITS": bits,
        "ORDER": 1 << bits,
        "SUBFIELD": sub,
    })
    cls.ZERO = cls(sub.ZERO, sub.ZERO)
    cls.ONE = cls(sub.ONE, sub.ZERO)
    cls.TAU = cls(sub.ZERO, sub.ONE)
    _logger.debug("Built %s: height %d, order 2^%d", name, height, bits)
    return cls


def _restore(height: int, value: int) -> FieldElement:
    return codec.from_int(_build_tower_field(height), value)


def tower_element(
    value: int, height: Optional[int] = None, config: Optional[TowerConfig] = None
) -> FieldElement:
    """Element holding value at the given height.

    With height=None the smallest height whose field holds value is used.
    Values wider than the field are truncated.
    """
    if height is None:
        height = codec.min_height(value)
    return codec.from_int(tower_field(height, config), value)


# Built at import, independent of max_height.
Tower2b = _build_tower_field(1)
Tower4b = _build_tower_field(2)
Tower8b = _build_tower_field(3)
Tower16b = _build_tower_field(4)
Tower32b = _build_tower_field(5)
Tower64b = _build_tower_field(6)
Tower128b = _build_tower_field(7)
