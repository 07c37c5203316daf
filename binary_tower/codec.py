"""Conversions between tower elements, integers, bits and bytes.

Bit order: an element of height h has 2^h coefficients over GF(2). As an
integer, coefficient i is bit i, so the `low` half of an element occupies the
low 2^(h-1) bits and the `high` half the rest. The canonical bit sequence
returned by to_bits() is most-significant coefficient first.

The functions here only use the class constants each field class carries
(HEIGHT, BITS, SUBFIELD, ZERO, ONE), so they work for every height including
the base BinaryField.
"""

from typing import Iterable, Sequence

import numpy as np


# --- Integers ---

def from_int(cls, value: int):
    """Decode the low cls.BITS bits of an unsigned integer.

    Wider values are truncated, not rejected.

    Raises:
        ValueError: If value is negative.
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"Cannot decode negative integer {value}")
    return _from_int(cls, value & ((1 << cls.BITS) - 1))


def _from_int(cls, value: int):
    if cls.HEIGHT == 0:
        return cls.ONE if value & 1 else cls.ZERO
    sub = cls.SUBFIELD
    half_mask = (1 << sub.BITS) - 1
    return cls(_from_int(sub, value & half_mask), _from_int(sub, value >> sub.BITS))


def to_int(elem) -> int:
    """Encode an element as an unsigned integer below its field's ORDER."""
    if elem.HEIGHT == 0:
        return 1 if elem else 0
    return to_int(elem.low) | (to_int(elem.high) << elem.SUBFIELD.BITS)


def num_digits(n: int) -> int:
    """Number of binary digits of n (at least 1)."""
    if n < 0:
        raise ValueError(f"num_digits of negative integer {n}")
    return max(1, n.bit_length())


def min_height(n: int) -> int:
    """Smallest tower height whose field can hold the integer n."""
    return (num_digits(n) - 1).bit_length()


# --- Bits ---

def to_bits(elem) -> list:
    """Coefficients of elem as BinaryField values, most significant first."""
    if elem.HEIGHT == 0:
        return [elem]
    return to_bits(elem.high) + to_bits(elem.low)


def from_bits(cls, bits: Sequence):
    """Inverse of to_bits. Accepts BinaryField values or 0/1 integers.

    Raises:
        ValueError: If the number of bits differs from cls.BITS or a bit is
            not 0 or 1.
    """
    bits = list(bits)
    if len(bits) != cls.BITS:
        raise ValueError(f"Expected {cls.BITS} bits for height {cls.HEIGHT}, got {len(bits)}")
    value = 0
    for bit in bits:
        b = int(bit)
        if b not in (0, 1):
            raise ValueError(f"Invalid bit value: {bit!r}")
        value = (value << 1) | b
    return _from_int(cls, value)


# --- Bytes ---

def byte_length(cls) -> int:
    """Serialized size in bytes. Heights below 3 still take one byte."""
    return max(1, cls.BITS // 8)


def to_bytes(elem, byteorder: str = "little") -> bytes:
    return to_int(elem).to_bytes(byte_length(type(elem)), byteorder=byteorder)


def from_bytes(cls, data: bytes, byteorder: str = "little"):
    """Decode a serialized element.

    Raises:
        ValueError: If data has the wrong length or, for sub-byte fields,
            sets bits outside the field.
    """
    if len(data) != byte_length(cls):
        raise ValueError(f"Serialized element must be {byte_length(cls)} bytes, got {len(data)}")
    value = int.from_bytes(data, byteorder=byteorder)
    if value >> cls.BITS:
        raise ValueError(f"Value {value:#x} does not fit in {cls.BITS} bits")
    return _from_int(cls, value)


# --- Numpy bit arrays ---

def to_bit_array(elem) -> np.ndarray:
    """Coefficients as a uint8 array, most significant first."""
    value = to_int(elem)
    n = elem.BITS
    return np.array([(value >> (n - 1 - i)) & 1 for i in range(n)], dtype=np.uint8)


def from_bit_array(cls, arr: np.ndarray):
    """Inverse of to_bit_array."""
    arr = np.asarray(arr).ravel()
    return from_bits(cls, [int(b) for b in arr])


def to_bit_matrix(elements: Iterable) -> np.ndarray:
    """Stack elements as columns of a (BITS, n) uint8 matrix.

    Rows are indexed by coefficient position, least significant first, so
    column j is the coordinate vector of elements[j] in the monomial basis.
    """
    elements = list(elements)
    if not elements:
        return np.zeros((0, 0), dtype=np.uint8)
    n_bits = elements[0].BITS
    matrix = np.zeros((n_bits, len(elements)), dtype=np.uint8)
    for col, elem in enumerate(elements):
        if elem.BITS != n_bits:
            raise ValueError(f"Mixed widths in bit matrix: {elem.BITS} vs {n_bits}")
        value = to_int(elem)
        for row in range(n_bits):
            matrix[row, col] = (value >> row) & 1
    return matrix
