"""Solvers for a series of December calendar puzzles, one module per day."""

__version__ = "0.1.0"