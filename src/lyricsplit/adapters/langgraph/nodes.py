"""LangGraph node factories for lyric segmentation."""

from langchain_core.runnables import RunnableLambda
from ...segmenters.lyrics import LyricSegmenter
from .state_keys import RAW_LYRICS, TARGET_LENGTH, LYRIC_LINES

def make_split_node(segmenter: LyricSegmenter,
                    text_key: str = RAW_LYRICS,
                    target_key: str = TARGET_LENGTH):
    """
    Create a LangGraph node that splits lyrics into display lines.
    
    Args:
        segmenter: Configured LyricSegmenter instance
        text_key: State key containing the raw lyric text
        target_key: State key with an optional target length override
        
    Returns:
        RunnableLambda: Node that adds the line list to state
    """
    def _split_lyrics(state):
        text = state.get(text_key, "")
        target_length = state.get(target_key)
        lines = segmenter.split(text, target_length)
        return {LYRIC_LINES: lines}
    
    return RunnableLambda(_split_lyrics)
