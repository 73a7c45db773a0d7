"""
Data Models

Defines the core data structures:
- Segment / Direction
- GridPair
"""

from .segment import Direction, Segment
from .grid_pair import GridPair

__all__ = ["Direction", "Segment", "GridPair"]
