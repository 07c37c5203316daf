"""Tests - Test suite for the binary tower field engine."""
