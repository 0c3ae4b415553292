"""Default state key names for LangGraph integration."""

# Standard state keys used by lyricsplit nodes
RAW_LYRICS = "raw_lyrics"
TARGET_LENGTH = "target_length"
LYRIC_LINES = "lyric_lines"
