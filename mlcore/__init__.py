"""Symbols, paths, typed values, trees, collections, fixed-point times and a ring queue."""

__version__ = "0.1.0"