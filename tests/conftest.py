"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import AuthConfig, Config, GeneratorConfig, LoggingConfig
from ids.generator import Generator
from service.app import create_app


class FixedEntropy:
    """Deterministic entropy source for tests."""

    name = "fixed"

    def __init__(self, value=bytes(range(1, 11))):
        self.value = value

    def next(self):
        return self.value


@pytest.fixture
def generator():
    """Create a fresh generator with default entropy."""
    return Generator()


@pytest.fixture
def fixed_generator():
    """Generator with a frozen clock and fixed entropy."""
    return Generator(clock=lambda: 1234567890123, entropy=FixedEntropy())


@pytest.fixture
def app_config(tmp_path):
    """Create test service config."""
    return Config(
        generator=GeneratorConfig(entropy="mixed", clock_policy="clamp", max_batch=10),
        auth=AuthConfig(username="tester", password="s3cret"),
        logging=LoggingConfig(level="ERROR", crash_file=str(tmp_path / "crash.log")),
    )


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
