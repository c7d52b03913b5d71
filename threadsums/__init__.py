"""Threaded array summing and a backtracking sudoku solver run over several grids at once."""

__version__ = "0.1.0"