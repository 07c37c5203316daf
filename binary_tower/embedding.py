"""Moving elements between tower heights.

split/join are the isomorphism between a height-h element and a pair of
height h-1 elements: the height-h field is a 2-dimensional vector space over
the height h-1 field with basis (1, TAU).

embed/downcast move a value between a field and one of its subfields without
changing it: embedding zero-pads the high coefficients, downcasting drops
them and requires them to be zero.
"""

from typing import Optional, Tuple

from .config import TowerConfig
from .errors import HeightError
from .field import FieldElement
from .tower import tower_field


def split(elem: FieldElement) -> Tuple[FieldElement, FieldElement]:
    """Return (low, high) with elem == low + high * TAU.

    Raises:
        HeightError: If elem is a height-0 element.
    """
    if elem.HEIGHT == 0:
        raise HeightError("Height 0 elements cannot be split")
    return elem.split()


def join(low: FieldElement, high: FieldElement, config: Optional[TowerConfig] = None) -> FieldElement:
    """Inverse of split(): the element low + high * TAU one level up.

    Raises:
        HeightError: If low and high have different heights.
    """
    if low.HEIGHT != high.HEIGHT:
        raise HeightError(f"join halves must share a height, got {low.HEIGHT} and {high.HEIGHT}")
    return tower_field(low.HEIGHT + 1, config).join(low, high)


def embed(elem: FieldElement, height: int, config: Optional[TowerConfig] = None) -> FieldElement:
    """The same field value viewed as an element of the given, larger height.

    Raises:
        HeightError: If height is below elem's height or above max_height.
    """
    if height < elem.HEIGHT:
        raise HeightError(f"Cannot embed height {elem.HEIGHT} element into height {height}")
    tower_field(height, config)
    while elem.HEIGHT < height:
        elem = tower_field(elem.HEIGHT + 1, config)(elem, elem.ZERO)
    return elem


def is_in_subfield(elem: FieldElement, height: int) -> bool:
    """True if elem lies in the subfield of the given height."""
    if height < 0:
        raise HeightError(f"Subfield height must be >= 0, got {height}")
    if height >= elem.HEIGHT:
        return True
    while elem.HEIGHT > height:
        if elem.high:
            return False
        elem = elem.low
    return True


def downcast(elem: FieldElement, height: int) -> FieldElement:
    """Inverse of embed(): the same value as an element of a smaller height.

    Raises:
        HeightError: If height is above elem's height.
        ValueError: If elem is not in the subfield of that height.
    """
    if not 0 <= height <= elem.HEIGHT:
        raise HeightError(f"Cannot downcast height {elem.HEIGHT} element to height {height}")
    if not is_in_subfield(elem, height):
        raise ValueError(f"{elem!r} is not in the height {height} subfield")
    while elem.HEIGHT > height:
        elem = elem.low
    return elem
