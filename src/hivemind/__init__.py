"""Consensus statistics and spectrum colors for a crowd-guessing game."""

__version__ = "0.1.0"
