"""Pydantic schemas for YAML splitter configuration."""

from pydantic import BaseModel, Field
from typing import List

DEFAULT_ABBREVIATIONS = [
    "Mr", "Mrs", "Ms", "Dr", "Sr", "Jr", "St", "Vs", "Prof", "Gen", "Rep", "Sen",
]

class ToleranceCfg(BaseModel):
    """Multipliers applied to the target length for every size decision."""
    max_ratio: float = Field(default=1.5, ge=1.0, le=5.0,
                            description="Segments up to limit * max_ratio are kept whole")
    max_slack: int = Field(default=5, ge=0, le=100,
                          description="Segments up to limit + max_slack are kept whole")
    reflow_ratio: float = Field(default=1.3, ge=1.0, le=5.0,
                               description="Line cap while packing punctuation atoms")
    huge_atom_ratio: float = Field(default=1.5, ge=1.0, le=5.0,
                                  description="Atoms above limit * huge_atom_ratio are re-segmented")
    early_split_ratio: float = Field(default=0.4, ge=0.0, le=1.0,
                                    description="Whitespace cuts before this fraction are rejected")
    late_split_ratio: float = Field(default=1.4, ge=1.0, le=5.0,
                                   description="Whitespace cuts after limit must stay below this fraction")
    
    class Config:
        extra = "forbid"

class SplitterConfig(BaseModel):
    """Complete configuration for the lyric splitter."""
    version: int = Field(default=1, description="Config schema version")
    target_length: int = Field(default=14, ge=1, description="Preferred line length in characters")
    tolerance: ToleranceCfg = Field(default_factory=ToleranceCfg)
    abbreviations: List[str] = Field(default_factory=lambda: list(DEFAULT_ABBREVIATIONS),
                                     description="Words whose trailing period is not a sentence end")
    mask_initials: bool = Field(default=True,
                                description="Treat a period after a single capital letter as an initial")
    
    class Config:
        extra = "forbid"
        
    def validate_settings(self) -> List[str]:
        """Validate cross-field settings and return any issues."""
        issues = []
        
        tol = self.tolerance
        if tol.early_split_ratio >= tol.late_split_ratio:
            issues.append(
                f"early_split_ratio ({tol.early_split_ratio}) must be below "
                f"late_split_ratio ({tol.late_split_ratio})"
            )
        if tol.reflow_ratio > tol.max_ratio:
            issues.append(
                f"reflow_ratio ({tol.reflow_ratio}) must not exceed max_ratio ({tol.max_ratio})"
            )
            
        # Abbreviations are matched case-insensitively
        lowered = [a.lower() for a in self.abbreviations]
        duplicates = sorted(set(x for x in lowered if lowered.count(x) > 1))
        if duplicates:
            issues.append(f"Duplicate abbreviations: {duplicates}")
            
        invalid = [a for a in self.abbreviations if not a.isalpha()]
        if invalid:
            issues.append(f"Abbreviations must be alphabetic: {invalid}")
            
        return issues
