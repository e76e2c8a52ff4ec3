"""Font package I/O layer for lilufo.

This module handles reading and writing the parts of a font package that
lilufo edits. It provides a clean abstraction layer between ufoLib2,
fontTools and the core operations.

Key responsibilities:
- Load and save font packages (groups and kerning) through ufoLib2
- Read groups.plist and kerning.plist directly for listings
- Enumerate, parse and rewrite glyph outline files

Key classes:
- FontPackage: Loaded font with nested kerning view
"""

from lilufo.io.glif import (
    iter_glyph_files,
    parse_glyph_file,
    serialize_tree,
    write_atomic,
    write_in_place,
)
from lilufo.io.package import FontPackage, flatten_kerning, nest_kerning
from lilufo.io.plists import read_groups_plist, read_kerning_plist, read_plist_dict

__all__ = [
    "FontPackage",
    "flatten_kerning",
    "iter_glyph_files",
    "nest_kerning",
    "parse_glyph_file",
    "read_groups_plist",
    "read_kerning_plist",
    "read_plist_dict",
    "serialize_tree",
    "write_atomic",
    "write_in_place",
]
