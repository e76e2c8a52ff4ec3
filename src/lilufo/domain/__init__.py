"""Domain models for lilufo.

This module contains the value types shared by the outline normalizer and
the kerning store. All models are plain dataclasses, independent of
ufoLib2 and fontTools.

Key classes:
- Side: Left or right kerning side, owning the storage prefix
- KerningKey: Glyph-or-group element of a kerning pair
- KerningGroup: A named kerning class on one side
- KerningPair: A kerning value between two keys
- NormalizationReport, GroupListing, PairListing: Operation results
"""

from lilufo.domain.kerning import (
    GROUP_REFERENCE_MARKER,
    KerningGroup,
    KerningKey,
    KerningPair,
    Side,
)
from lilufo.domain.names import validate_glyph_name, validate_glyph_names
from lilufo.domain.reports import (
    FileNormalization,
    FontSummary,
    GroupEditResult,
    GroupListing,
    NormalizationReport,
    PairEditResult,
    PairListing,
)

__all__: list[str] = [
    "GROUP_REFERENCE_MARKER",
    # Kerning types
    "KerningGroup",
    "KerningKey",
    "KerningPair",
    "Side",
    # Reports
    "FileNormalization",
    "FontSummary",
    "GroupEditResult",
    "GroupListing",
    "NormalizationReport",
    "PairEditResult",
    "PairListing",
    # Validation
    "validate_glyph_name",
    "validate_glyph_names",
]
