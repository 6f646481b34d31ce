import pytest

from fatal import terminate
from fatal.models import Config
from fatal.terminate import Terminator


@pytest.fixture(autouse=True)
def plain_default(monkeypatch):
    """Keep FATAL_COLOR in the test environment from leaking into results."""
    monkeypatch.setattr(terminate, "DEFAULT", Terminator(Config()))


class RecordingStream:
    """Text stream that records each write call separately."""

    def __init__(self, fail_on=None):
        self.writes: list[str] = []
        self.fail_on = fail_on

    def write(self, text: str) -> int:
        if self.fail_on is not None and self.fail_on(text):
            raise OSError("write failed")
        self.writes.append(text)
        return len(text)

    def flush(self) -> None:
        pass

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def stream():
    return RecordingStream()


@pytest.fixture
def make_stream():
    """Factory for streams that fail writes matching ``fail_on``."""
    return RecordingStream
