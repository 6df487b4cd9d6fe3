"""Root conftest – registers the launcher_flags pytest fixtures."""

pytest_plugins = ["launcher_flags.testing.fixtures"]
