"""Test configuration and fixtures."""

import json
import pytest
from pathlib import Path
import tempfile

from phraseline.runtime.parser import Parser


@pytest.fixture
def sample_table():
    """Provide a small hand-made weight table."""
    return {
        "UW4": {"a": 10000},
        "BW2": {"ea": 500},
        "TW1": {"bcd": -200},
    }


@pytest.fixture
def sample_model_json(sample_table):
    """Provide the sample table serialized as JSON."""
    return json.dumps(sample_table)


@pytest.fixture
def sample_parser(sample_table):
    """Provide a parser over the sample table."""
    return Parser(sample_table)


@pytest.fixture
def temp_model_file(sample_model_json):
    """Provide a temporary JSON model file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8') as f:
        f.write(sample_model_json)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def models_dir(tmp_path):
    """Provide a models directory holding a tiny ja.json."""
    (tmp_path / "ja.json").write_text(
        json.dumps({"UW4": {"は": 3000}, "UW3": {"は": 4000}}, ensure_ascii=False),
        encoding="utf-8",
    )
    return tmp_path


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
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
