"""Multiplication between elements of different tower heights.

A field of height N is a vector space over its subfield of height M < N,
with the monomials in tau_M, ..., tau_(N-1) as basis. Multiplying by a
height-M value therefore scales each height-M block of the larger operand
independently, which costs 2^(N-M) height-M products instead of one full
height-N product.

Two entry points:
    mul_mixed(a, b)          order independent, typed at the larger height
    mul_into_receiver(a, b)  the `a * b` operator policy, typed as `a`

The operator policy cannot widen the receiver, so a smaller receiver
multiplied by a larger operand comes back unchanged. mul_mixed is the
properly typed alternative.
"""

import logging
from typing import Optional

from .config import TowerConfig, resolve_config
from .errors import HeightError
from .field import FieldElement

_logger = logging.getLogger(__name__)


def small_by_large_mul(large: FieldElement, small: FieldElement) -> FieldElement:
    """Multiply large by the zero-padded embedding of small.

    Equivalent to large * embed(small, large.HEIGHT) but never materialises
    the embedding.

    Raises:
        HeightError: If small is taller than large.
    """
    if small.HEIGHT > large.HEIGHT:
        raise HeightError(
            f"small_by_large_mul: operand height {small.HEIGHT} exceeds receiver height {large.HEIGHT}"
        )
    if small.HEIGHT == large.HEIGHT:
        return large * small
    return type(large)(small_by_large_mul(large.low, small), small_by_large_mul(large.high, small))


def mul_into_receiver(
    receiver: FieldElement, other: FieldElement, config: Optional[TowerConfig] = None
) -> FieldElement:
    """Cross-height product typed as the receiver.

    A taller receiver gets the exact product. A shorter receiver is returned
    unchanged, or HeightError is raised when config (default: the active
    config) sets strict_cross_height.
    """
    if other.HEIGHT <= receiver.HEIGHT:
        return small_by_large_mul(receiver, other)
    if resolve_config(config).strict_cross_height:
        raise HeightError(
            f"Cannot multiply height {receiver.HEIGHT} receiver by height {other.HEIGHT} operand; "
            "use mul_mixed()"
        )
    _logger.debug(
        "Receiver height %d is below operand height %d, returning receiver unchanged",
        receiver.HEIGHT, other.HEIGHT,
    )
    return receiver


def mul_mixed(a: FieldElement, b: FieldElement) -> FieldElement:
    """Product of two elements of any heights, typed at the larger height."""
    if not isinstance(a, FieldElement) or not isinstance(b, FieldElement):
        raise TypeError(f"mul_mixed expects field elements, got {type(a).__name__} and {type(b).__name__}")
    if a.HEIGHT < b.HEIGHT:
        a, b = b, a
    return small_by_large_mul(a, b)
