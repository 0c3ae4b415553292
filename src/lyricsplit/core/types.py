"""Data types and result structures for lyric segmentation."""

from dataclasses import dataclass, field
from typing import List, Dict, Optional

from ..config.schema import ToleranceCfg

class SegmentationError(RuntimeError):
    """Raised when a pending segment fails to shrink between steps."""
    pass

@dataclass(frozen=True)
class Tolerance:
    """Length thresholds derived from a target line length."""
    limit: int
    cfg: ToleranceCfg = field(default_factory=ToleranceCfg)

    @property
    def max_len(self) -> float:
        """Segments at or below this length are emitted as-is."""
        return max(self.limit * self.cfg.max_ratio, self.limit + self.cfg.max_slack)

    @property
    def reflow_limit(self) -> float:
        return self.limit * self.cfg.reflow_ratio

    @property
    def huge_atom_limit(self) -> float:
        return self.limit * self.cfg.huge_atom_ratio

    @property
    def early_split_floor(self) -> float:
        return self.limit * self.cfg.early_split_ratio

    @property
    def late_split_ceiling(self) -> float:
        return self.limit * self.cfg.late_split_ratio

@dataclass
class SegmentationResult:
    """Result of segmenting one block of lyric text."""
    lines: List[str]
    target_length: int
    paragraphs: int              # non-empty paragraphs processed
    hard_cuts: int = 0           # whitespace fallback had to cut mid-word
    length_summary: Dict[str, float] = field(default_factory=dict)

    @property
    def line_count(self) -> int:
        return len(self.lines)

@dataclass
class LineSpan:
    """Location of an output line inside the raw text."""
    index: int                   # position of the line in the output list
    start: int
    end: int                     # exclusive

@dataclass
class HighlightSegment:
    """A run of raw text, flagged when it belongs to the active line."""
    text: str
    highlight: bool = False
    line_index: Optional[int] = None

EMIT = "emit"
SEGMENT = "segment"

@dataclass(frozen=True)
class Step:
    """Pending unit of work for the segment processor."""
    kind: str                    # "emit" | "segment"
    text: str
