"""Glyph outline file access.

Glyph outlines are stored one per file under ``<package>/glyphs/`` as XML
trees of ``contour`` and ``point`` elements. This module finds those files,
parses them into ElementTree elements and writes them back.
"""

import os
import shutil
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

from lilufo.config import OutlineConfig
from lilufo.exceptions import GlyphFileError, GlyphWriteError, PackageLoadError


def iter_glyph_files(package_root: Path, config: OutlineConfig | None = None) -> list[Path]:
    """List outline files under the package, sorted by path.

    Args:
        package_root: Font package directory
        config: Outline settings providing directory and glob pattern

    Returns:
        Sorted list of outline file paths (empty if the glyphs directory is absent)

    Raises:
        PackageLoadError: If package_root is not a directory
    """
    config = config or OutlineConfig()
    if not package_root.is_dir():
        raise PackageLoadError(str(package_root), "package directory does not exist")

    glyphs_dir = package_root / config.glyphs_dir
    return sorted(p for p in glyphs_dir.glob(config.glyph_pattern) if p.is_file())


def parse_glyph_file(path: Path) -> ET.Element:
    """Parse an outline file into its root element.

    Raises:
        GlyphFileError: If the file cannot be read or is not well-formed XML
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise GlyphFileError(str(path), e.strerror or str(e)) from e

    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise GlyphFileError(str(path), f"malformed XML: {e}") from e


def serialize_tree(root: ET.Element, indent: str = "  ") -> bytes:
    """Serialize an outline tree with stable indentation.

    Existing whitespace between elements is replaced, so serializing a
    parsed copy of the output yields the same bytes. XML comments do not
    survive parsing and are dropped from rewritten files, and the XML
    declaration is written with single-quoted attributes.
    """
    ET.indent(root, space=indent)
    return ET.tostring(root, encoding="UTF-8", xml_declaration=True) + b"\n"


def write_atomic(path: Path, data: bytes) -> None:
    """Replace path with data via a temporary file in the same directory.

    Raises:
        GlyphWriteError: If the temporary file cannot be written or renamed
    """
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise GlyphWriteError(str(path), e.strerror or str(e)) from e


def write_in_place(path: Path, data: bytes) -> None:
    """Overwrite path directly. A failure mid-write can truncate the file.

    Raises:
        GlyphWriteError: If the file cannot be written
    """
    try:
        path.write_bytes(data)
    except OSError as e:
        raise GlyphWriteError(str(path), e.strerror or str(e)) from e
