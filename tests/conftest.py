import pytest

from gcspec import bootstrap


@pytest.fixture(scope="session", autouse=True)
def setup_gcspec_registry() -> None:
    """Bootstrap the built-in groups once for the entire test session."""

    bootstrap()
