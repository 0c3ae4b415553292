"""Punctuation-aware lyric segmenter."""

from typing import List, Optional, Tuple

from ..config.schema import SplitterConfig
from ..core.abc import Logger, Meter
from ..core.stats import length_summary
from ..core.types import EMIT, SEGMENT, SegmentationError, SegmentationResult, Step, Tolerance
from .abbreviations import AbbreviationGuard
from .paragraphs import split_into_paragraphs
from .reflow import pack_and_reflow
from .tokenizer import CLAUSE, SENTENCE, split_atoms
from .whitespace import find_best_split_index

class LyricSegmenter:
    """
    Splits lyric text into display lines close to a target length.
    
    Each paragraph is cut by the first strategy that breaks it: sentence
    punctuation, clause punctuation, then whitespace (or a hard cut when a
    segment has no usable whitespace). Pending segments live on an explicit
    stack, so very long paragraphs do not grow the call stack.
    """
    
    def __init__(self, config: Optional[SplitterConfig] = None, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.
        
        Args:
            config: Splitter configuration (defaults to SplitterConfig())
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config if config is not None else SplitterConfig()
        self.guard = AbbreviationGuard(self.config.abbreviations,
                                       mask_initials=self.config.mask_initials)
        self.log = logger
        self.meter = meter
        
    def segment(self, text: str) -> List[str]:
        """Segment text with the configured target length."""
        return self.split(text)
    
    def split(self, text: str, target_length: Optional[int] = None) -> List[str]:
        """
        Split text into display lines.
        
        Args:
            text: Raw lyric text, possibly several paragraphs
            target_length: Preferred line length (defaults to config.target_length)
            
        Returns:
            List[str]: Trimmed, non-empty lines in reading order
        """
        return self.run(text, target_length).lines
    
    def run(self, text: str, target_length: Optional[int] = None) -> SegmentationResult:
        """
        Split text and report how the split went.
        
        Raises:
            ValueError: If target_length is not a positive integer
        """
        limit = self._check_target_length(
            self.config.target_length if target_length is None else target_length
        )
        tolerance = Tolerance(limit, self.config.tolerance)
        
        paragraphs = split_into_paragraphs(self.guard.mask(text)) if text else []
        
        masked_lines: List[str] = []
        hard_cuts = 0
        for paragraph in paragraphs:
            hard_cuts += self._process(paragraph, tolerance, masked_lines)
            
        lines = self.guard.unmask(masked_lines)
        summary = length_summary(lines)
        
        if self.meter:
            self.meter.observe("lyricsplit.lines", float(len(lines)))
        if self.log:
            self.log.info("segmentation_complete",
                          target_length=limit,
                          paragraphs=len(paragraphs),
                          lines=len(lines),
                          hard_cuts=hard_cuts)
        
        return SegmentationResult(
            lines=lines,
            target_length=limit,
            paragraphs=len(paragraphs),
            hard_cuts=hard_cuts,
            length_summary=summary,
        )
    
    def _process(self, paragraph: str, tolerance: Tolerance, accumulator: List[str]) -> int:
        """Append the lines for one paragraph; return the number of hard cuts."""
        hard_cuts = 0
        # Each entry carries the length its segment must stay below
        stack: List[Tuple[Step, int]] = [(Step(SEGMENT, paragraph), len(paragraph) + 1)]
        
        while stack:
            step, bound = stack.pop()
            if step.kind == EMIT:
                accumulator.append(step.text)
                continue
                
            text = step.text
            if len(text) >= bound:
                raise SegmentationError(
                    f"Segment did not shrink: length {len(text)} >= {bound}"
                )
                
            steps, hard_cut = self._split_once(text, tolerance)
            if hard_cut:
                hard_cuts += 1
            for pending in reversed(steps):
                stack.append((pending, len(text)))
                
        return hard_cuts
    
    def _split_once(self, text: str, tolerance: Tolerance) -> Tuple[List[Step], bool]:
        """Apply the first strategy that breaks text."""
        if len(text) <= tolerance.max_len:
            self._count("terminal")
            return [Step(EMIT, text.strip())], False
        
        for kind in (SENTENCE, CLAUSE):
            steps = pack_and_reflow(split_atoms(text, kind), tolerance)
            if steps is not None:
                self._count(kind)
                return steps, False
        
        index = find_best_split_index(text, tolerance)
        hard_cut = index is None
        if hard_cut:
            index = tolerance.limit
            self._count("hard_cut")
            if self.log:
                self.log.warn("hard_cut", index=index, segment_length=len(text))
        else:
            self._count("whitespace")
            
        head = text[:index].strip()
        tail = text[index:].strip()
        
        steps = []
        if head:
            steps.append(Step(EMIT, head))
        if tail:
            steps.append(Step(SEGMENT, tail))
        return steps, hard_cut
    
    def _count(self, strategy: str) -> None:
        if self.meter:
            self.meter.inc("lyricsplit.strategy", strategy=strategy)
    
    @staticmethod
    def _check_target_length(target_length) -> int:
        if isinstance(target_length, bool) or not isinstance(target_length, int):
            raise ValueError(f"target_length must be a positive integer, got {target_length!r}")
        if target_length < 1:
            raise ValueError(f"target_length must be a positive integer, got {target_length}")
        return target_length

def segment_lyrics(raw_text: str, target_length: int, *,
                   config: Optional[SplitterConfig] = None,
                   logger: Optional[Logger] = None,
                   meter: Optional[Meter] = None) -> List[str]:
    """
    Split raw lyric text into ordered display lines.
    
    Args:
        raw_text: Lyric text; paragraphs separated by line breaks
        target_length: Preferred line length in characters
        config: Optional splitter configuration (tolerances, abbreviations)
        logger: Optional structured logger
        meter: Optional metrics collector
        
    Returns:
        List[str]: Lines in reading order; empty for blank input
        
    Raises:
        ValueError: If target_length is not a positive integer
    """
    segmenter = LyricSegmenter(config, logger=logger, meter=meter)
    return segmenter.split(raw_text, target_length)
