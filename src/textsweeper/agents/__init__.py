"""
Minesweeper agents module.

Automated players that choose which cell of a board engine to reveal:
- RandomAgent: uniform choice among hidden cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
