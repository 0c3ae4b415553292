"""Reversible masking of periods that do not end a sentence."""

import re
from typing import List, Optional, Sequence

from ..config.schema import DEFAULT_ABBREVIATIONS

# Private sentinel standing in for a masked period. Input that already
# contains it is not supported: it would come back as a period.
SENTINEL = "\u0000"

INITIAL_RE = re.compile(r'\b([A-Z])\.')

class AbbreviationGuard:
    """
    Masks abbreviation and initial periods before segmentation and
    restores them afterwards.
    """
    
    def __init__(self, abbreviations: Optional[Sequence[str]] = None,
                 mask_initials: bool = True):
        """
        Initialize guard.
        
        Args:
            abbreviations: Words whose trailing period is masked (case-insensitive)
            mask_initials: Also mask the period after a single capital letter
        """
        if abbreviations is None:
            abbreviations = DEFAULT_ABBREVIATIONS
        self.abbreviations = list(abbreviations)
        self.mask_initials = mask_initials
        self._abbrev_re = None
        if self.abbreviations:
            alternation = "|".join(re.escape(a) for a in self.abbreviations)
            self._abbrev_re = re.compile(rf'\b({alternation})\.', re.IGNORECASE)
    
    def mask(self, raw: str) -> str:
        """Replace non-terminating periods with the sentinel."""
        masked = raw
        if self._abbrev_re is not None:
            masked = self._abbrev_re.sub(rf'\1{SENTINEL}', masked)
        if self.mask_initials:
            masked = INITIAL_RE.sub(rf'\1{SENTINEL}', masked)
        return masked
    
    def unmask(self, lines: Sequence[str]) -> List[str]:
        """Restore literal periods in every line."""
        return [line.replace(SENTINEL, ".") for line in lines]
