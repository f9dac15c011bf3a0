"""Testing generators – Hypothesis strategies for event definition sources."""
from log_taxonomy.testing.generators.strategies import event_source_strategy, member_name_strategy

__all__ = ["event_source_strategy", "member_name_strategy"]
