"""Solvers for small classic math puzzles, each with a command-line entry point."""

__version__ = "0.1.0"