"""Tests for BigIntConfig."""

import dataclasses

import pytest

from ubigint import DEFAULT_CONFIG, BigInt, BigIntConfig


class TestBigIntConfig:
    """Tests for config defaults and validation."""

    def test_defaults(self):
        config = BigIntConfig()
        assert config.uint_bits == 32
        assert config.check_underflow is False
        assert config.uint_mask == 2**32 - 1

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            BigIntConfig().uint_bits = 64  # type: ignore[misc]

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            BigIntConfig(uint_bits=0)

    def test_default_instance(self):
        assert isinstance(DEFAULT_CONFIG, BigIntConfig)


class TestBigIntConfigFromEnv:
    """Tests for reading UBIGINT_* environment variables."""

    def test_unset_uses_defaults(self, monkeypatch):
        monkeypatch.delenv("UBIGINT_UINT_BITS", raising=False)
        monkeypatch.delenv("UBIGINT_CHECK_UNDERFLOW", raising=False)
        assert BigIntConfig.from_env() == BigIntConfig()

    def test_reads_values(self, monkeypatch):
        monkeypatch.setenv("UBIGINT_UINT_BITS", "64")
        monkeypatch.setenv("UBIGINT_CHECK_UNDERFLOW", "Yes")
        assert BigIntConfig.from_env() == BigIntConfig(uint_bits=64, check_underflow=True)

    def test_invalid_width(self, monkeypatch):
        monkeypatch.setenv("UBIGINT_UINT_BITS", "wide")
        with pytest.raises(ValueError, match="UBIGINT_UINT_BITS"):
            BigIntConfig.from_env()


class TestConfigAppliesToBigInt:
    """BigInt reads its class-wide config."""

    def test_uint_width(self, monkeypatch):
        monkeypatch.setattr(BigInt, "config", BigIntConfig(uint_bits=16))
        assert int(BigInt(70_000)) == 70_000 % 2**16
        assert BigInt(-1) == 2**16 - 1

    def test_explicit_bits_override_config(self, monkeypatch):
        monkeypatch.setattr(BigInt, "config", BigIntConfig(uint_bits=16))
        assert BigInt(70_000).to_uint(bits=32) == 70_000
