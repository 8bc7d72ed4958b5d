"""Deterministic, configurable conversion of text into uwu speak."""

__version__ = "0.1.0"
__all__ = ["seed", "utils", "uwuifier"]