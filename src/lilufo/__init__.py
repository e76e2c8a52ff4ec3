"""Lil' UFO - Scriptable edits for UFO font source packages.

Lil' UFO is a CLI tool for font engineers who need repeatable edits to a
font source package without opening a font editor. It rounds glyph outline
coordinates to even integers and lists, creates and edits kerning groups
and kerning pairs.

Example:
    $ lilufo --ufo-path MyFont.ufo add-kerning-group --name O --side left --members O,Q,C,G

This adds the left-side group public.kern1.O to groups.plist.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
