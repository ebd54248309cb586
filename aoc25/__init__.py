"""Advent of Code 2025 solutions for days 1 to 7 and their helper utilities."""

__version__ = "0.1.0"