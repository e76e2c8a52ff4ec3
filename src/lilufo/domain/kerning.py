"""Kerning value types.

Groups and pairs are persisted in the font with a string-prefix convention:
left-side groups are stored under ``public.kern1.<name>`` and right-side
groups under ``public.kern2.<name>``. Inside the library a reference is
always a :class:`KerningKey`, which records whether it names a glyph or a
group. Conversion to and from the prefixed form happens only through
:meth:`KerningKey.to_storage` and :meth:`KerningKey.from_storage`.
"""

from dataclasses import dataclass
from enum import Enum

from lilufo.exceptions import InvalidSideError

GROUP_REFERENCE_MARKER = "@"


class Side(str, Enum):
    """Side of a kerning pair that a group applies to.

    A left group collects glyphs that appear as the first element of a
    pair, a right group those that appear as the second element.
    """

    LEFT = "left"
    RIGHT = "right"

    @property
    def prefix(self) -> str:
        """Storage prefix for groups on this side."""
        return "public.kern1." if self is Side.LEFT else "public.kern2."

    @classmethod
    def parse(cls, value: str) -> "Side":
        """Parse a side name.

        Args:
            value: Either "left" or "right"

        Returns:
            Matching Side

        Raises:
            InvalidSideError: If value is not a known side
        """
        if isinstance(value, cls):
            return value
        for side in cls:
            if side.value == value:
                return side
        raise InvalidSideError(str(value))

    @classmethod
    def from_storage_key(cls, key: str) -> "Side | None":
        """Recover the side of a stored group key, or None for other keys."""
        for side in cls:
            if key.startswith(side.prefix):
                return side
        return None


@dataclass(frozen=True, slots=True)
class KerningKey:
    """One element of a kerning pair: a glyph or a group.

    Attributes:
        name: Glyph name, or group name without any prefix
        is_group: True if this key refers to a kerning group
    """

    name: str
    is_group: bool = False

    @classmethod
    def glyph(cls, name: str) -> "KerningKey":
        return cls(name=name, is_group=False)

    @classmethod
    def group(cls, name: str) -> "KerningKey":
        return cls(name=name, is_group=True)

    @classmethod
    def parse(cls, token: str) -> "KerningKey":
        """Parse user input, where ``@Name`` refers to a group.

        Args:
            token: Raw pair element as typed by the user

        Returns:
            Glyph or group key
        """
        if token.startswith(GROUP_REFERENCE_MARKER):
            return cls.group(token[len(GROUP_REFERENCE_MARKER):])
        return cls.glyph(token)

    @classmethod
    def from_storage(cls, key: str, side: Side) -> "KerningKey":
        """Decode a stored kerning key for the given pair position.

        Only the prefix belonging to ``side`` marks a group; any other key,
        including one carrying the opposite side's prefix, is a glyph name.
        """
        if key.startswith(side.prefix):
            return cls.group(key[len(side.prefix):])
        return cls.glyph(key)

    def to_storage(self, side: Side) -> str:
        """Encode this key for storage at the given pair position."""
        if self.is_group:
            return f"{side.prefix}{self.name}"
        return self.name

    def display(self) -> str:
        """Render as ``@Name`` for groups or the bare glyph name."""
        if self.is_group:
            return f"{GROUP_REFERENCE_MARKER}{self.name}"
        return self.name


@dataclass(frozen=True, slots=True)
class KerningGroup:
    """A named kerning class on one side.

    Attributes:
        name: Group name without prefix
        side: Side the group applies to
        members: Glyph names in stored order
    """

    name: str
    side: Side
    members: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Prefixed storage key."""
        return KerningKey.group(self.name).to_storage(self.side)


@dataclass(frozen=True, slots=True)
class KerningPair:
    """A kerning adjustment between a first and a second element.

    Attributes:
        first: Left element of the pair
        second: Right element of the pair
        value: Kerning value in font units
    """

    first: KerningKey
    second: KerningKey
    value: int
