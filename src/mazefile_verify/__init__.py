"""Mazefile Verify - advisory link-consistency checks."""
from .logic import verify_bytes, verify_maze

__all__ = ["verify_bytes", "verify_maze"]
