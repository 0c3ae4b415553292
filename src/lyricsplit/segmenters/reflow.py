"""Greedy repacking of punctuation atoms into display lines."""

from typing import List, Optional

from ..core.types import EMIT, SEGMENT, Step, Tolerance

def pack_and_reflow(atoms: List[str], tolerance: Tolerance) -> Optional[List[Step]]:
    """
    Pack atoms into lines no longer than the reflow limit.
    
    Atoms are space-joined onto the running line while they fit. An atom
    longer than the huge-atom limit is not packed: the running line is
    flushed and the atom is handed back for full re-segmentation.
    
    Args:
        atoms: Trimmed atoms in reading order
        tolerance: Thresholds for the target length
        
    Returns:
        Optional[List[Step]]: Steps in reading order, or None when fewer than
        two atoms exist and the split did not break the segment
    """
    if len(atoms) < 2:
        return None
    
    steps = []
    current = ""
    
    for atom in atoms:
        if current and len(current) + 1 + len(atom) <= tolerance.reflow_limit:
            current += " " + atom
            continue
            
        if current:
            steps.append(Step(EMIT, current))
            
        if len(atom) > tolerance.huge_atom_limit:
            steps.append(Step(SEGMENT, atom))
            current = ""
        else:
            current = atom
    
    if current:
        steps.append(Step(EMIT, current))
        
    return steps
