"""Basic font information."""

from lilufo.domain import FontSummary
from lilufo.io import FontPackage


def describe_font(package: FontPackage) -> FontSummary:
    """Collect naming, version and glyph count from a loaded font."""
    info = package.info
    return FontSummary(
        family_name=info.familyName,
        style_name=info.styleName,
        version_major=info.versionMajor,
        version_minor=info.versionMinor,
        glyph_count=len(package.font),
    )
