"""Unit tests for SlugService."""

import pytest

from config import SlugConfig
from conftest import ScriptedBytes
from core.errors import InvalidParameter, InvalidSlug, RandomnessUnavailable
from slugs.service import SlugService


@pytest.fixture
def fixed_service(slug_config, clock, zero_bytes):
    """Service with a fixed clock and zero random bytes."""
    return SlugService(config=slug_config, clock=clock, randbytes=zero_bytes)


class TestSlugServiceGenerate:
    """Tests for issuing slugs."""

    def test_default_length(self, service):
        """generate uses the configured default length."""
        assert len(service.generate()) == 17

    def test_configured_default(self):
        """A different default length is honoured."""
        service = SlugService(config=SlugConfig(default_length=10))
        assert len(service.generate()) == 11

    def test_explicit_length(self, service):
        """Explicit length overrides the default."""
        assert len(service.generate(19)) == 20

    def test_generate_many(self, fixed_service):
        """Batch issuance returns count slugs."""
        slugs = fixed_service.generate_many(5, 10)
        assert slugs == ["QJUuq-SjJcC"] * 5

    @pytest.mark.parametrize("count", [0, -1, 11, "3", True])
    def test_count_bounds(self, service, count):
        """Counts outside 1..max_batch are rejected."""
        with pytest.raises(InvalidParameter):
            service.generate_many(count)

    def test_config_sampling(self, clock):
        """Sampling mode comes from config."""
        source = ScriptedBytes([255, 3])
        service = SlugService(config=SlugConfig(sampling="rejection"), clock=clock, randbytes=source)
        assert service.generate(10) == "rzpPR-gZzNn"
        assert len(source.requests) == 20


class TestSlugServiceStats:
    """Tests for issuance counters."""

    def test_counts_per_precision(self, service):
        """Issued slugs are counted by precision."""
        service.generate_many(3, 10)
        service.generate(16)
        stats = service.get_stats()
        assert stats["issued"]["seconds"] == 3
        assert stats["issued"]["microseconds"] == 1
        assert stats["total_issued"] == 4
        assert stats["failures"] == 0

    def test_failure_counted_and_raised(self, slug_config, clock):
        """Core errors propagate and bump the failure counter."""
        def broken(n):
            raise OSError("no entropy")

        service = SlugService(config=slug_config, clock=clock, randbytes=broken)
        with pytest.raises(RandomnessUnavailable):
            service.generate()
        assert service.get_stats() == {
            "issued": {"seconds": 0, "milliseconds": 0, "microseconds": 0, "nanoseconds": 0},
            "total_issued": 0,
            "failures": 1,
        }


class TestSlugServiceDescribe:
    """Tests for slug description."""

    def test_describe_microseconds(self, fixed_service):
        """A microsecond slug decodes to its ISO timestamp."""
        info = fixed_service.describe(fixed_service.generate(16))
        assert info["precision"] == "microseconds"
        assert info["digits"] == "1732056789123456"
        assert info["value"] == 1732056789123456
        assert info["timestamp"] == "2024-11-19T22:53:09.123456Z"

    def test_describe_seconds(self, fixed_service):
        """A seconds slug has zero microseconds."""
        info = fixed_service.describe("QJUuq-SjJcC")
        assert info["length"] == 10
        assert info["timestamp"] == "2024-11-19T22:53:09.000000Z"

    def test_describe_nanoseconds(self, fixed_service):
        """Nanoseconds are truncated to microseconds in the ISO form."""
        info = fixed_service.describe(fixed_service.generate(19))
        assert info["value"] == 1732056789123456789
        assert info["timestamp"] == "2024-11-19T22:53:09.123456Z"

    def test_describe_invalid(self, service):
        """Malformed slugs raise InvalidSlug."""
        with pytest.raises(InvalidSlug):
            service.describe("nope")
