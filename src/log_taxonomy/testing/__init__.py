"""Testing – in-memory doubles and property-based strategies."""
from log_taxonomy.testing.fakes import FakeServiceCollection, RecordingHandler

__all__ = ["FakeServiceCollection", "RecordingHandler"]
