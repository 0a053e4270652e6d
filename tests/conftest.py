"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, SlugConfig
from slugs.service import SlugService
from ui.app import create_app


class FakeClock:
    """Clock returning a fixed (seconds, nanoseconds) reading."""

    def __init__(self, seconds=1732056789, nanos=123456789):
        self.seconds = seconds
        self.nanos = nanos
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.seconds, self.nanos


class TickingClock(FakeClock):
    """Clock that advances by `step_ns` after every reading."""

    def __init__(self, seconds=1732056789, nanos=0, step_ns=1_000):
        super().__init__(seconds, nanos)
        self.step_ns = step_ns

    def __call__(self):
        reading = super().__call__()
        self.seconds, self.nanos = divmod(self.seconds * 1_000_000_000 + self.nanos + self.step_ns, 1_000_000_000)
        return reading


class ScriptedBytes:
    """Random source replaying a fixed byte sequence, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.requests = []

    def __call__(self, n):
        self.requests.append(n)
        out = bytes(self.values[(len(self.requests) - 1) % len(self.values)] for _ in range(n))
        return out


@pytest.fixture
def clock():
    """Fixed clock at 2024-11-19T22:53:09.123456789Z."""
    return FakeClock()


@pytest.fixture
def zero_bytes():
    """Random source that always yields 0x00."""
    return ScriptedBytes([0])


@pytest.fixture
def slug_config():
    """Create test slug config."""
    return SlugConfig(default_length=16, max_batch=10, sampling="modulo")


@pytest.fixture
def service(slug_config):
    """Create test slug service."""
    return SlugService(config=slug_config)


@pytest.fixture
async def app(tmp_path):
    """Create test FastAPI app."""
    config = Config(slugs=SlugConfig(max_batch=10))
    config.logging.file = str(tmp_path / "slugs.log")
    return create_app(config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
