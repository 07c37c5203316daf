"""Unit tests for Montgomery batch inversion."""

import random
import time

import pytest

from binary_tower import (
    BinaryField,
    HeightError,
    NoInverseError,
    Tower8b,
    Tower16b,
    Tower64b,
    batch_inverse,
)


class TestBatchInverseTower8b:
    """Tests for byte-sized tower field batch inversion."""

    def test_empty_list(self) -> None:
        """Empty input returns empty output."""
        assert batch_inverse([]) == []

    def test_single_element(self) -> None:
        """Single element is inverted correctly."""
        val = Tower8b.from_int(0xC5)
        result = batch_inverse([val])
        assert len(result) == 1
        assert result[0] * val == Tower8b.ONE

    def test_two_elements(self) -> None:
        """Two elements are inverted correctly."""
        vals = [Tower8b.from_int(123), Tower8b.from_int(45)]
        results = batch_inverse(vals)
        assert len(results) == 2
        for v, r in zip(vals, results):
            assert v * r == Tower8b.ONE

    def test_all_nonzero_elements(self) -> None:
        """Every nonzero element of the field is inverted correctly."""
        vals = [Tower8b.from_int(i) for i in range(1, 256)]
        results = batch_inverse(vals)
        assert len(results) == 255
        for v, r in zip(vals, results):
            assert v * r == Tower8b.ONE

    def test_matches_scalar_inversion(self) -> None:
        """Batch inversion matches scalar inversion."""
        vals = [Tower8b.from_int(i * 7 + 13) for i in range(30)]
        batch_results = batch_inverse(vals)
        scalar_results = [v ** -1 for v in vals]
        for b, s in zip(batch_results, scalar_results):
            assert b == s

    def test_repeated_values(self) -> None:
        """Duplicates are inverted independently."""
        val = Tower8b.from_int(0x5A)
        results = batch_inverse([val, val, val])
        assert results == [val.inverse()] * 3


class TestBatchInverseErrors:
    """Rejected inputs."""

    def test_zero_raises(self) -> None:
        """A zero anywhere in the batch is reported by index."""
        vals = [Tower8b.from_int(3), Tower8b.ZERO, Tower8b.from_int(5)]
        with pytest.raises(NoInverseError, match="element 1"):
            batch_inverse(vals)

    def test_mixed_heights_raise(self) -> None:
        """Elements of different heights cannot share a batch."""
        with pytest.raises(HeightError):
            batch_inverse([Tower8b.ONE, Tower16b.ONE])

    def test_binary_field(self) -> None:
        """GF(2) batches invert ONE and reject ZERO."""
        assert batch_inverse([BinaryField.ONE, BinaryField.ONE]) == [BinaryField.ONE] * 2
        with pytest.raises(NoInverseError):
            batch_inverse([BinaryField.ZERO])


class TestBatchInverseWide:
    """Tests for wider tower fields."""

    def test_many_elements(self, rng: random.Random) -> None:
        """Random 64-bit elements are inverted correctly."""
        vals = [Tower64b.random(rng) for _ in range(20)]
        vals = [v if v else Tower64b.ONE for v in vals]
        results = batch_inverse(vals)
        for v, r in zip(vals, results):
            assert v * r == Tower64b.ONE

    def test_performance(self) -> None:
        """1024 Tower16b inversions complete in reasonable time."""
        vals = [Tower16b.from_int(i + 1) for i in range(1024)]

        t0 = time.time()
        results = batch_inverse(vals)
        elapsed = time.time() - t0

        # Verify first few for correctness
        for v, r in zip(vals[:10], results[:10]):
            assert v * r == Tower16b.ONE

        # One scalar inversion is ~30 multiplications, batch is 3 per element
        assert elapsed < 10.0, f"Batch inversion took {elapsed:.3f}s, expected < 10s"
