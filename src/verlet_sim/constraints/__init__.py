# MIT License (see LICENSE)
"""
Position constraints.

    - CircularBoundary: keeps particles inside a movable circle.
"""
from .boundary import CircularBoundary

__all__ = [
    "CircularBoundary",
]
