"""Line length statistics."""

import numpy as np
from typing import Dict, List, Sequence

def length_summary(lines: Sequence[str]) -> Dict[str, float]:
    """
    Summarize output line lengths.
    
    Args:
        lines: Output lines
        
    Returns:
        Dict[str, float]: count, mean, min, max and std of line lengths
    """
    if not lines:
        return {"count": 0, "mean": 0.0, "min": 0.0, "max": 0.0, "std": 0.0}
    
    lengths = np.fromiter((len(line) for line in lines), dtype=np.int64, count=len(lines))
    return {
        "count": int(lengths.size),
        "mean": float(lengths.mean()),
        "min": float(lengths.min()),
        "max": float(lengths.max()),
        "std": float(lengths.std()),
    }

def overlong_lines(lines: Sequence[str], max_len: float) -> List[int]:
    """Indices of lines longer than max_len."""
    if not lines:
        return []
    lengths = np.array([len(line) for line in lines])
    return [int(i) for i in np.flatnonzero(lengths > max_len)]
