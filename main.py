#!/usr/bin/env python3
"""
textsweeper - Main entry point.

Usage:
    python main.py play [--seed N]
    python main.py simulate [--difficulty N] [--games N] [--seed N]
"""
import sys

from textsweeper.console import main


if __name__ == "__main__":
    sys.exit(main())
