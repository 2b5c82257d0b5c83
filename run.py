#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:
    python run.py play
    python run.py replay --moves 0,0,1,1,2,2,3
    python run.py benchmark --iterations 500 --seed 7
"""

import sys

from connect4_engine.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
