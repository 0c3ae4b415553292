"""Paragraph splitting on line breaks."""

import re
from typing import List

LINE_BREAK_RE = re.compile(r'\r?\n')

def split_into_paragraphs(text: str) -> List[str]:
    """
    Split text on line breaks into trimmed, non-empty paragraphs.
    
    Blank lines are dropped; they produce no output lines.
    """
    result = []
    for paragraph in LINE_BREAK_RE.split(text):
        paragraph = paragraph.strip()
        if paragraph:
            result.append(paragraph)
    return result
