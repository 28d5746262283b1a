#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py demo [--games N] [--seed S]
"""
from minefield.cli import main


if __name__ == "__main__":
    main()
