"""Whitespace fallback: choose where to cut a segment with no usable punctuation."""

from typing import Optional

from ..core.types import Tolerance

def _last_space_at_or_before(text: str, pos: int) -> int:
    for i in range(min(pos, len(text) - 1), -1, -1):
        if text[i].isspace():
            return i
    return -1

def _first_space_from(text: str, pos: int) -> int:
    for i in range(pos, len(text)):
        if text[i].isspace():
            return i
    return -1

def find_best_split_index(text: str, tolerance: Tolerance) -> Optional[int]:
    """
    Find the whitespace index to cut text at.
    
    Prefers the last whitespace at or before the target length. A cut that
    would leave a head shorter than the early-split floor is traded for the
    first whitespace past the target, as long as that one stays within the
    late-split ceiling.
    
    Args:
        text: Trimmed segment longer than the tolerance
        tolerance: Thresholds for the target length
        
    Returns:
        Optional[int]: Index of the whitespace to cut at, or None when the
        caller has to hard-cut at the target length
    """
    limit = tolerance.limit
    index = _last_space_at_or_before(text, limit)
    
    if index < tolerance.early_split_floor:
        next_space = _first_space_from(text, limit)
        if next_space != -1 and next_space <= tolerance.late_split_ceiling:
            return next_space
        if index == -1:
            return None
    
    return index
