"""
Lyric Splitter - Punctuation-aware line segmentation for song lyrics.

Turns free-form lyric text into an ordered list of display lines close to a
target length, breaking at sentence punctuation, then clause punctuation,
then whitespace.
"""

from .segmenters.lyrics import LyricSegmenter, segment_lyrics

__version__ = "0.1.0"

__all__ = ["LyricSegmenter", "segment_lyrics", "__version__"]
