"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from textscan.locales.loader import builtin_locale, load_locale_from_string


@pytest.fixture
def c_locale():
    """Provide the default C locale."""
    return builtin_locale("C")


@pytest.fixture
def sample_locale_yaml():
    """Provide a sample locale YAML for testing."""
    return """
name: de_DE_custom
base: de_DE
whitespace: " \\t\\n_"
integer_type: int64
"""


@pytest.fixture
def sample_locale(sample_locale_yaml):
    """Provide a loaded locale object for testing."""
    return load_locale_from_string(sample_locale_yaml)


@pytest.fixture
def temp_locale_file(sample_locale_yaml):
    """Provide a temporary locale file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_locale_yaml)
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


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()
