"""
connect4_engine.interfaces - User interfaces for Connect Four

This package contains front ends that drive the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
