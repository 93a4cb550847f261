"""Tests for run parameters and settings."""

import pytest
from pydantic import ValidationError
from py_mosaic.config import MosaicParams, Settings, format_fraction


class TestMosaicParams:
    """Test parameter validation and file naming."""

    def test_defaults(self):
        params = MosaicParams()
        assert params.output_stem() == "1000-100-20-0.01-10000-0"
        assert params.filename() == "1000-100-20-0.01-10000-0.png"

    def test_whole_fraction(self):
        params = MosaicParams(size=4, num_samples=2, num_seeds=2, circle_frac=1.0, timeout=50, seed=42)
        assert params.output_stem() == "4-2-2-1-50-42"
        assert params.filename("gif") == "4-2-2-1-50-42.gif"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("size", 0),
            ("num_samples", 0),
            ("num_seeds", -1),
            ("circle_frac", 0.0),
            ("timeout", 0),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            MosaicParams(**{field: value})

    def test_zero_seeds_allowed(self):
        assert MosaicParams(num_seeds=0).num_seeds == 0

    def test_frozen(self):
        params = MosaicParams()
        with pytest.raises(ValidationError):
            params.size = 5

    def test_format_fraction(self):
        assert format_fraction(0.01) == "0.01"
        assert format_fraction(1.0) == "1"
        assert format_fraction(2.5) == "2.5"


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MOSAIC_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.default_size == 1000
        assert settings.trace_walk is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MOSAIC_DEFAULT_SIZE", "64")
        monkeypatch.setenv("MOSAIC_RECORD_GIF", "true")
        settings = Settings(_env_file=None)
        assert settings.default_size == 64
        assert settings.record_gif is True
