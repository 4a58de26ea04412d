"""
textsweeper - text-based Minesweeper engine.

Subpackages:
- game: board engine and Gymnasium environment
- agents: automated players
- evaluation: play many games and collect metrics
"""
__version__ = "0.1.0"
