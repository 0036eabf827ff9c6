"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from pragmaticseg.config.loader import load_config_from_string
from pragmaticseg.segmenters.sentence import PragmaticSegmenter


@pytest.fixture
def segmenter():
    """Provide a default English segmenter."""
    return PragmaticSegmenter("en")


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return r"""
version: 1
language: en
min_length: 2
abbreviations:
  extra: [eq, ref]
  prepositive: [hon]
  numeric: [para]
rules:
  - name: section_sign
    stage: numbers
    pattern: '§(\.)\s?\d'
    replacement: "∯"
  - name: genus_abbreviation
    stage: abbreviations
    pattern: '\b[A-Z][a-z](\.)\s[a-z]{3,}'
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


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
    """Simple meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
