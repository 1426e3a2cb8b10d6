"""Sparrow in Kyiv, a flapping-bird arcade game with a local leaderboard."""

__version__ = "0.1.0"