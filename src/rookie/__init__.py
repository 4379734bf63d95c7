"""Rookie - a two-player chess rules engine."""

__version__ = "0.1.0"
