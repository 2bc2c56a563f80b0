#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}]
    python main.py simulate [--games N]
"""
from minefield.cli import main


if __name__ == "__main__":
    main()
