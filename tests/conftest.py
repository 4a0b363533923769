import pytest
from unittest.mock import MagicMock

from memprobe.probes.base import OsStat


class RecordingProbe(OsStat):
    """A probe that returns a canned value and counts how often it ran."""
    def __init__(self, label="Test stat", value=42, error=None):
        self.label = label
        self.value = value
        self.error = error
        self.stat_calls = 0

    def name(self) -> str:
        return self.label

    def stat(self):
        self.stat_calls += 1
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def recording_probe():
    return RecordingProbe(label="Available memory", value=2048)


@pytest.fixture
def fake_logger():
    """Stands in for the structlog logger the dispatcher is handed."""
    return MagicMock()


@pytest.fixture
def meminfo_file(tmp_path):
    """
    Writes a synthetic /proc/meminfo and returns its path.
    """
    def _write(*lines: str):
        path = tmp_path / "meminfo"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_probe():
    return RecordingProbe
