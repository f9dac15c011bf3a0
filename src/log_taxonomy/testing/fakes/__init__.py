"""Testing fakes – in-memory doubles for logging and container ports."""
from log_taxonomy.testing.fakes.handlers import CapturedRecord, RecordingHandler
from log_taxonomy.testing.fakes.services import FakeServiceCollection

__all__ = ["CapturedRecord", "FakeServiceCollection", "RecordingHandler"]
