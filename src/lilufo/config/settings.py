"""Configuration settings for Lil' UFO."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutlineConfig(BaseModel):
    """Configuration for the glyph outline normalization pass."""

    glyphs_dir: str = Field(
        default="glyphs",
        description="Directory holding glyph outline files, relative to the package root",
    )
    glyph_pattern: str = Field(
        default="*.glif",
        description="Glob pattern matching glyph outline files",
    )
    indent: str = Field(
        default="  ",
        description="Indentation used when serializing outline trees",
    )
    grid: int = Field(
        default=2,
        ge=1,
        description="Coordinates are snapped to multiples of this value",
    )
    strict_numbers: bool = Field(
        default=False,
        description="Fail on unparsable coordinates instead of treating them as zero",
    )
    atomic_writes: bool = Field(
        default=True,
        description="Write each outline file to a temporary file and rename it into place",
    )


class KerningConfig(BaseModel):
    """Configuration for kerning group and pair edits."""

    require_known_glyphs: bool = Field(
        default=False,
        description="Reject bare glyph names that are not in the font's glyph set",
    )


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class LilUfoSettings(BaseModel):
    """Main application settings."""

    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    kerning: KerningConfig = Field(default_factory=KerningConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LilUfoSettings:
    """Get default application settings."""
    return LilUfoSettings()
