"""
connect4_engine - Connect Four rules engine

This package provides the board, turn and outcome logic for Connect Four,
with a Gymnasium environment and a command-line front end built on top.
"""

# Version number
__version__ = '0.1.0'
