from typing import List

from models.segment import Segment


def discard_shorter_than(segments: List[Segment], min_length: int) -> List[Segment]:
    """Keeps segments with length >= min_length, in their original order."""
    return [seg for seg in segments if seg.length >= min_length]
