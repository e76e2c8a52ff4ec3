"""Direct property-list access for the kerning metadata files.

The read-only listing commands read ``groups.plist`` and ``kerning.plist``
straight from disk rather than loading the whole font.
"""

from pathlib import Path
from typing import Any

from fontTools.misc import plistlib

from lilufo.exceptions import PackageLoadError

GROUPS_FILENAME = "groups.plist"
KERNING_FILENAME = "kerning.plist"


def read_plist_dict(path: Path) -> dict[str, Any] | None:
    """Read a property list whose top level is a dictionary.

    Args:
        path: Property list file

    Returns:
        Parsed dictionary in file order, or None if the file does not exist

    Raises:
        PackageLoadError: If the file cannot be read or parsed, or its top
            level is not a dictionary
    """
    if not path.exists():
        return None

    try:
        with open(path, "rb") as fp:
            data = plistlib.load(fp)
    except (OSError, ValueError, SyntaxError) as e:
        raise PackageLoadError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise PackageLoadError(str(path), "top-level value is not a dictionary")
    return data


def read_groups_plist(package_root: Path) -> dict[str, Any] | None:
    """Read ``groups.plist`` from the package, or None if absent."""
    return read_plist_dict(package_root / GROUPS_FILENAME)


def read_kerning_plist(package_root: Path) -> dict[str, Any] | None:
    """Read ``kerning.plist`` from the package, or None if absent."""
    return read_plist_dict(package_root / KERNING_FILENAME)
