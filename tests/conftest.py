"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from lyricsplit.config.loader import load_config_from_string
from lyricsplit.segmenters.lyrics import LyricSegmenter


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
target_length: 20
tolerance:
  max_ratio: 1.5
  max_slack: 5
  reflow_ratio: 1.3
  huge_atom_ratio: 1.5
  early_split_ratio: 0.4
  late_split_ratio: 1.4
abbreviations: [Mr, Mrs, Dr, Feat]
mask_initials: true
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def lyrics_file(tmp_path):
    """Provide a small lyrics file for CLI tests."""
    path = tmp_path / "song.txt"
    path.write_text(
        "Hello world. This is a test sentence that is quite long indeed.\n"
        "\n"
        "Oh baby, baby, how was I supposed to know\n",
        encoding="utf-8",
    )
    return path




@pytest.fixture
def default_segmenter():
    """Provide a segmenter with default configuration."""
    return LyricSegmenter()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures metrics."""
    
    def __init__(self):
        self.counters = []
        self.observations = []
    
    def inc(self, name: str, amount: int = 1, **tags: str):
        self.counters.append((name, amount, tags))
    
    def observe(self, name: str, value: float, **tags: str):
        self.observations.append((name, value, tags))
    
    def strategies(self):
        """Strategy tags in the order they were counted."""
        return [tags.get("strategy") for name, _, tags in self.counters
                if name == "lyricsplit.strategy"]


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
