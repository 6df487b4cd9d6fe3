"""Testing fakes – in-memory doubles for flag ports."""
from launcher_flags.testing.fakes.feature_flags import FakeFlagValueSource

__all__ = ["FakeFlagValueSource"]
