"""Diff-scoped verification of bilingual translation entries in CI."""

__version__ = "0.1.0"
