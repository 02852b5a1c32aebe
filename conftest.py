import pytest

from infrastructure.container import container


@pytest.fixture(autouse=True)
def _mock_infrastructure():
    """Every test gets fresh in-memory storage and email backends."""
    container.configure_for_testing()
    yield
    container.reset()
