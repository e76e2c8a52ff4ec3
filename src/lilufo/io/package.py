"""Font package loading and saving.

FontPackage wraps a ufoLib2 font and presents kerning as the two-level
mapping stored in ``kerning.plist`` (first key -> second key -> value)
instead of ufoLib2's flat ``(first, second)`` dictionary.
"""

from pathlib import Path

import ufoLib2
from ufoLib2.objects import Info

from lilufo.exceptions import PackageLoadError, PackageSaveError

Number = int | float


def nest_kerning(flat: dict[tuple[str, str], Number]) -> dict[str, dict[str, Number]]:
    """Convert ``{(first, second): value}`` to ``{first: {second: value}}``."""
    nested: dict[str, dict[str, Number]] = {}
    for (first, second), value in flat.items():
        nested.setdefault(first, {})[second] = value
    return nested


def flatten_kerning(nested: dict[str, dict[str, Number]]) -> dict[tuple[str, str], Number]:
    """Convert ``{first: {second: value}}`` to ``{(first, second): value}``.

    Integral float values are stored as ints so they are written as
    ``<integer>`` elements.
    """
    flat: dict[tuple[str, str], Number] = {}
    for first, seconds in nested.items():
        for second, value in seconds.items():
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            flat[(first, second)] = value
    return flat


class FontPackage:
    """A loaded font package with editable groups and kerning.

    Example:
        package = FontPackage.load(Path("MyFont.ufo"))
        package.groups["public.kern1.O"] = ["O", "Q"]
        package.save()
    """

    def __init__(
        self, font: ufoLib2.Font, path: Path | None = None, validate: bool = False
    ) -> None:
        """Wrap an already opened font.

        Args:
            font: ufoLib2 font object
            path: Location the font was loaded from, used as the default save target
            validate: Run the UFO data validators when saving. Off by default
                because replaced group member lists may hold duplicates.
        """
        self._font = font
        self._path = path
        self._validate = validate
        self.groups: dict[str, list[str]] = {
            name: list(members) for name, members in font.groups.items()
        }
        self.kerning: dict[str, dict[str, Number]] = nest_kerning(dict(font.kerning))

    @classmethod
    def load(cls, path: Path, validate: bool = False) -> "FontPackage":
        """Open a font package from disk.

        Raises:
            PackageLoadError: If the path is missing or is not a readable font package
        """
        if not path.exists():
            raise PackageLoadError(str(path), "path does not exist")

        try:
            font = ufoLib2.Font.open(path, lazy=False, validate=validate)
        except Exception as e:
            raise PackageLoadError(str(path), str(e)) from e
        return cls(font, path, validate=validate)

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def font(self) -> ufoLib2.Font:
        """The underlying ufoLib2 font."""
        return self._font

    @property
    def info(self) -> Info:
        """The font's fontinfo data."""
        return self._font.info

    @property
    def glyph_names(self) -> set[str]:
        """Names of the glyphs in the default layer."""
        return set(self._font.keys())

    def save(self, path: Path | None = None) -> None:
        """Write groups and kerning back and save the font package.

        Args:
            path: Target location (defaults to the path the font was loaded from)

        Raises:
            PackageSaveError: If no target is known or the font cannot be written
        """
        target = path or self._path
        if target is None:
            raise PackageSaveError("<unsaved>", "no path to save to")

        self._font.groups.clear()
        self._font.groups.update(
            {name: list(members) for name, members in self.groups.items()}
        )
        self._font.kerning.clear()
        self._font.kerning.update(flatten_kerning(self.kerning))

        try:
            self._font.save(target, overwrite=True, validate=self._validate)
        except Exception as e:
            raise PackageSaveError(str(target), str(e)) from e
        self._path = target
