"""Map output lines back onto the raw text they came from."""

from typing import List, Optional, Sequence
from ..core.types import HighlightSegment, LineSpan

def locate_lines(raw: str, lines: Sequence[str]) -> List[Optional[LineSpan]]:
    """
    Find where each line sits in the raw text.
    
    Lines are searched in order, each starting where the previous located
    line ended. A line that cannot be found (for example after manual
    editing) maps to None and leaves the search position unchanged.
    
    Args:
        raw: Original lyric text
        lines: Output lines in reading order
        
    Returns:
        List[Optional[LineSpan]]: One entry per line
    """
    spans: List[Optional[LineSpan]] = []
    cursor = 0
    
    for i, line in enumerate(lines):
        if not line:
            spans.append(None)
            continue
        start = raw.find(line, cursor)
        if start == -1:
            spans.append(None)
            continue
        end = start + len(line)
        spans.append(LineSpan(index=i, start=start, end=end))
        cursor = end
        
    return spans

def highlight_segments(raw: str, lines: Sequence[str], active_index: int) -> List[HighlightSegment]:
    """
    Split raw text into before / active line / after runs.
    
    Args:
        raw: Original lyric text
        lines: Output lines in reading order
        active_index: Index of the line to highlight
        
    Returns:
        List[HighlightSegment]: Three runs when the active line is located,
        otherwise the whole text as a single plain run
    """
    if 0 <= active_index < len(lines):
        span = locate_lines(raw, lines[:active_index + 1])[active_index]
        if span is not None:
            return [
                HighlightSegment(text=raw[:span.start]),
                HighlightSegment(text=raw[span.start:span.end], highlight=True,
                                 line_index=active_index),
                HighlightSegment(text=raw[span.end:]),
            ]
    
    return [HighlightSegment(text=raw)]
