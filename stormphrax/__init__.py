"""Building blocks of a UCI chess engine: transposition table, WDL model, tunables, UCI argument parsing and utilities."""

__version__ = "0.1.0"