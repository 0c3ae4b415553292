"""
Single-pass delimiter scanner.

Splits a segment into (content, delimiter) pairs for one delimiter class and
combines them into atoms: trimmed, non-empty chunks that keep their trailing
punctuation.
"""

from typing import Callable, List, Optional, Tuple

SENTENCE_TERMINATORS = frozenset(".!?！？")
CLAUSE_TERMINATORS = frozenset(",，;；:：")
DASHES = frozenset("-–—")
ELLIPSIS = "..."

SENTENCE = "sentence"
CLAUSE = "clause"

# A matcher returns the end index of a delimiter starting at i, or None
Matcher = Callable[[str, int], Optional[int]]

def _at_boundary(text: str, i: int) -> bool:
    """True at end of text or before whitespace."""
    return i >= len(text) or text[i].isspace()

def match_sentence(text: str, i: int) -> Optional[int]:
    """Match a run of sentence terminators followed by whitespace or end."""
    j = i
    while j < len(text) and text[j] in SENTENCE_TERMINATORS:
        j += 1
    if j > i and _at_boundary(text, j):
        return j
    return None

def match_clause(text: str, i: int) -> Optional[int]:
    """
    Match clause punctuation, a spaced dash run or an ellipsis.
    
    Dashes count only with whitespace on both sides, so hyphenated words
    such as "semi-detached" are never split.
    """
    ch = text[i]
    if ch in CLAUSE_TERMINATORS and _at_boundary(text, i + 1):
        return i + 1
    if ch.isspace():
        j = i + 1
        while j < len(text) and text[j] in DASHES:
            j += 1
        if j > i + 1 and j < len(text) and text[j].isspace():
            return j + 1
    if text.startswith(ELLIPSIS, i) and _at_boundary(text, i + len(ELLIPSIS)):
        return i + len(ELLIPSIS)
    return None

MATCHERS = {
    SENTENCE: match_sentence,
    CLAUSE: match_clause,
}

def tokenize(text: str, kind: str) -> List[Tuple[str, str]]:
    """
    Scan text once and pair every content chunk with its trailing delimiter.
    
    Args:
        text: Segment to scan
        kind: SENTENCE or CLAUSE
        
    Returns:
        List[Tuple[str, str]]: (content, delimiter) pairs covering the whole
        text in order. The last pair has an empty delimiter.
    """
    matcher = MATCHERS[kind]
    pairs = []
    start = 0
    i = 0
    while i < len(text):
        end = matcher(text, i)
        if end is None:
            i += 1
            continue
        pairs.append((text[start:i], text[i:end]))
        start = i = end
    pairs.append((text[start:], ""))
    return pairs

def build_atoms(pairs: List[Tuple[str, str]]) -> List[str]:
    """Join each pair, trim it and drop empties."""
    atoms = []
    for content, delimiter in pairs:
        atom = (content + delimiter).strip()
        if atom:
            atoms.append(atom)
    return atoms

def split_atoms(text: str, kind: str) -> List[str]:
    """Tokenize text for one delimiter class and return its atoms."""
    return build_atoms(tokenize(text, kind))
