"""Advent of Code puzzle solutions for 2021 and 2024 and their shared helpers."""

__version__ = "0.1.0"