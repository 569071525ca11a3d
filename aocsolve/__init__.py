"""Advent of Code 2024 solutions for days 1 to 4, a solving command and an input fetcher."""

__version__ = "0.1.0"
__all__ = ["cli", "day01", "day02", "day03", "day04", "fetch"]