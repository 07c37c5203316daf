"""Tests for GF(2), height 0 of the tower.

The prime field GF(2) from galois serves as the reference implementation.
"""

import copy
import pickle

import galois
import pytest

from binary_tower import BinaryField, NoInverseError, Tower8b

GF2 = galois.GF(2)

ZERO = BinaryField.ZERO
ONE = BinaryField.ONE


class TestBinaryFieldArithmetic:
    """Arithmetic against the galois prime field of width 2."""

    @pytest.mark.parametrize("a,b", [(0, 1), (1, 1)])
    def test_matches_prime_field(self, a: int, b: int) -> None:
        """Sum, product, inverse and quotient agree with GF(2)."""
        arg1 = BinaryField.from_int(a)
        arg2 = BinaryField.from_int(b)
        ref_a = GF2(a)
        ref_b = GF2(b)

        assert arg1 + arg2 == BinaryField.from_int(int(ref_a + ref_b))
        assert arg1 - arg2 == arg1 + arg2
        assert arg1 * arg2 == BinaryField.from_int(int(ref_a * ref_b))

        inv = arg2.inverse()
        assert inv == arg2

        assert arg1 / arg2 == BinaryField.from_int(int(ref_a / ref_b))

    @pytest.mark.parametrize("a", [0, 1])
    @pytest.mark.parametrize("b", [0, 1])
    def test_truth_tables(self, a: int, b: int) -> None:
        """Addition is XOR and multiplication is AND."""
        x, y = BinaryField(a), BinaryField(b)
        assert int(x + y) == a ^ b
        assert int(x * y) == a & b

    def test_negation_is_identity(self) -> None:
        """-a == a in characteristic 2."""
        assert -ZERO == ZERO
        assert -ONE == ONE

    def test_pow(self) -> None:
        """Powers of ZERO and ONE, with 0^0 == ONE."""
        assert ONE.pow(0) == ONE
        assert ZERO.pow(0) == ONE
        assert ZERO.pow(5) == ZERO
        assert ONE ** 7 == ONE


class TestBinaryFieldNoInverse:
    """Division by zero is a distinguishable failure."""

    def test_inverse_of_zero_raises(self) -> None:
        """ZERO has no inverse."""
        with pytest.raises(NoInverseError):
            ZERO.inverse()

    @pytest.mark.parametrize("numerator", [0, 1])
    def test_division_by_zero_raises(self, numerator: int) -> None:
        """Dividing by ZERO raises NoInverseError."""
        with pytest.raises(NoInverseError):
            BinaryField(numerator) / ZERO

    def test_no_inverse_is_zero_division(self) -> None:
        """Callers guarding ZeroDivisionError also catch NoInverseError."""
        with pytest.raises(ZeroDivisionError):
            ONE % ZERO

    def test_try_inverse(self) -> None:
        """try_inverse returns None for ZERO."""
        assert ZERO.try_inverse() is None
        assert ONE.try_inverse() == ONE


class TestBinaryFieldValues:
    """Construction, constants and value semantics."""

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 0), (3, 1), (255, 1), (2**70, 0)])
    def test_from_int_keeps_low_bit(self, n: int, expected: int) -> None:
        """from_int keeps only the lowest bit."""
        assert int(BinaryField.from_int(n)) == expected

    def test_from_int_rejects_negative(self) -> None:
        """Negative integers are rejected."""
        with pytest.raises(ValueError):
            BinaryField.from_int(-1)

    @pytest.mark.parametrize("bad", [2, -1, 7])
    def test_constructor_rejects_non_bits(self, bad: int) -> None:
        """The constructor only accepts 0 and 1."""
        with pytest.raises(ValueError):
            BinaryField(bad)

    def test_values_are_interned(self) -> None:
        """Every construction path returns one of the two singletons."""
        assert BinaryField(1) is ONE
        assert BinaryField(0) is ZERO
        assert BinaryField.from_int(3) is ONE

    def test_immutable(self) -> None:
        """The bit cannot be reassigned."""
        with pytest.raises(AttributeError):
            ONE._bit = 0

    def test_pickle_and_copy_preserve_identity(self) -> None:
        """Pickle and copy hand back the singletons."""
        assert pickle.loads(pickle.dumps(ONE)) is ONE
        assert copy.copy(ZERO) is ZERO
        assert copy.deepcopy(ONE) is ONE

    def test_constants(self) -> None:
        """Class constants of height 0."""
        assert BinaryField.HEIGHT == 0
        assert BinaryField.BITS == 1
        assert BinaryField.ORDER == 2
        assert BinaryField.SUBFIELD is None
        assert BinaryField.TAU is ONE

    def test_truthiness_and_repr(self) -> None:
        """ZERO is falsy, and both values print by name and work as dict keys."""
        assert not ZERO
        assert ONE
        assert ZERO.is_zero()
        assert repr(ONE) == "BinaryField.ONE"
        assert {ZERO: "z", ONE: "o"}[BinaryField(1)] == "o"

    def test_bits(self) -> None:
        """A GF(2) value is its own single bit and serialises to one byte."""
        assert ONE.to_bits() == [ONE]
        assert BinaryField.from_bits([0]) is ZERO
        assert ONE.to_bytes() == b"\x01"

    def test_generator(self) -> None:
        """The multiplicative group of GF(2) is trivial and generated by ONE."""
        assert BinaryField.multiplicative_generator() == ONE
        assert ONE.is_primitive()
        assert not ZERO.is_primitive()


class TestBinaryFieldCrossHeight:
    """A height-0 receiver never widens."""

    def test_small_receiver_returned_unchanged(self) -> None:
        """A GF(2) receiver is returned for a taller operand."""
        big = Tower8b.from_int(0xC5)
        assert ONE * big is ONE
        assert ZERO * big is ZERO

    def test_large_receiver_scales(self) -> None:
        """A taller receiver is scaled by the GF(2) operand."""
        big = Tower8b.from_int(0xC5)
        assert big * ONE == big
        assert big * ZERO == Tower8b.ZERO
