"""
Baseball Elimination Service

Determines which teams of a division can no longer finish first.
"""

__version__ = "1.0.0"
