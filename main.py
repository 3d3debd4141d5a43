#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S]
                   [--unique-mines] [--no-color]

Commands during play:
    flag <x> <y>   (or f <x> <y>)
    reveal <x> <y> (or r <x> <y>)
    quit
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
