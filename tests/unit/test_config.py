"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from lilufo.config import (
    KerningConfig,
    LilUfoSettings,
    LoggingConfig,
    LogLevel,
    OutlineConfig,
    get_default_settings,
)


class TestSettings:
    """Tests for LilUfoSettings and its sections."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = get_default_settings()

        assert settings.outline.glyphs_dir == "glyphs"
        assert settings.outline.glyph_pattern == "*.glif"
        assert settings.outline.grid == 2
        assert settings.outline.atomic_writes
        assert not settings.outline.strict_numbers
        assert not settings.kerning.require_known_glyphs
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_sections(self) -> None:
        """Test sections can be supplied explicitly."""
        settings = LilUfoSettings(
            outline=OutlineConfig(strict_numbers=True),
            kerning=KerningConfig(require_known_glyphs=True),
            logging=LoggingConfig(log_file=Path("run.log")),
        )

        assert settings.outline.strict_numbers
        assert settings.kerning.require_known_glyphs
        assert settings.logging.log_file == Path("run.log")

    def test_grid_must_be_positive(self) -> None:
        """Test a zero grid is rejected."""
        with pytest.raises(ValidationError):
            OutlineConfig(grid=0)

    def test_log_level_accepts_known_levels(self) -> None:
        """Test level names validate into LogLevel."""
        config = LoggingConfig(log_level="DEBUG")
        assert config.log_level is LogLevel.DEBUG

    def test_log_level_rejects_unknown(self) -> None:
        """Test an unknown level is rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="BOGUS")
