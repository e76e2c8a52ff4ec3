"""Exception hierarchy for Lil' UFO."""


class LilUfoError(Exception):
    """Base exception for all Lil' UFO errors."""

    pass


class InvalidArgumentError(LilUfoError):
    """A caller-supplied value was rejected before any change was made."""

    pass


class InvalidSideError(InvalidArgumentError):
    """Kerning side is neither left nor right."""

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"Invalid kerning side '{side}': must be either 'left' or 'right'")


class InvalidGlyphNameError(InvalidArgumentError):
    """Glyph or group name violates the naming rules."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid name {name!r}: {reason}")


class InvalidCoordinateError(InvalidArgumentError):
    """Point coordinate could not be parsed as a number."""

    def __init__(self, path: str, attribute: str, value: str) -> None:
        self.path = path
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"Invalid coordinate {attribute}={value!r} in '{path}'"
        )


class NotFoundError(LilUfoError):
    """Referenced entity does not exist."""

    pass


class GroupNotFoundError(NotFoundError):
    """Kerning group not present in the font."""

    def __init__(self, name: str, side: str) -> None:
        self.name = name
        self.side = side
        super().__init__(f"Kerning group '{name}' does not exist on the {side} side")


class GlyphNotFoundError(NotFoundError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class PackageError(LilUfoError):
    """Errors related to reading or writing the font package."""

    pass


class PackageLoadError(PackageError):
    """Error loading a font package."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class PackageSaveError(PackageError):
    """Error saving a font package."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class GlyphFileError(PackageError):
    """Glyph outline file could not be found, read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read glyph file '{path}': {reason}")


class GlyphWriteError(PackageError):
    """Glyph outline file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write glyph file '{path}': {reason}")
