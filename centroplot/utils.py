"""
Utility functions

Arm arithmetic shared by the loader and the layout engine.
"""

from __future__ import annotations
from typing import Union

Number = Union[int, float]


def centromere_midpoint(start: Number, end: Number) -> float:
    """
    Centromere position as the middle of its region

    Args:
        start: Centromeric region start (bp)
        end: Centromeric region end (bp)

    Returns:
        Midpoint (bp), always a float
    """
    return (start + end) / 2


def longest_arm(length: Number, centromere_position: Number) -> float:
    """
    Longest of the two arms around the centromere

    Args:
        length: Chromosome length (bp)
        centromere_position: Centromere position (bp)

    Returns:
        max(centromere_position, length - centromere_position)
    """
    return float(max(centromere_position, length - centromere_position))
