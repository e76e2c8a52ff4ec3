"""Core operations for lilufo.

This module contains the two independent subsystems:

- Outline normalization (snap point coordinates to even integers)
- Kerning store (list, add and edit kerning groups and pairs)

Operations return structured reports and raise LilUfoError subclasses;
they never print.

Key functions:
- normalize: Round every outline file in a package
- round_to_even / is_even: Coordinate string transforms
- list_groups / list_pairs: Decode stored kerning data
- add_group / edit_group / add_pair: Validated kerning edits
- describe_font: Basic font information

Key classes:
- OutlineNormalizer: Configurable outline normalization pass
"""

from lilufo.core.info import describe_font
from lilufo.core.kerning import (
    KerningFont,
    add_group,
    add_pair,
    edit_group,
    list_groups,
    list_pairs,
)
from lilufo.core.normalizer import OutlineNormalizer, normalize
from lilufo.core.rounding import (
    is_even,
    parse_coordinate,
    round_half_away_from_zero,
    round_to_even,
    snap_to_grid,
)

__all__ = [
    "KerningFont",
    "OutlineNormalizer",
    "add_group",
    "add_pair",
    "describe_font",
    "edit_group",
    "is_even",
    "list_groups",
    "list_pairs",
    "normalize",
    "parse_coordinate",
    "round_half_away_from_zero",
    "round_to_even",
    "snap_to_grid",
]
