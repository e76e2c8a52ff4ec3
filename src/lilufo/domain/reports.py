"""Structured results returned by lilufo operations.

Operations never print. They return these values and the CLI layer
decides how to render them.
"""

from dataclasses import dataclass, field
from pathlib import Path

from lilufo.domain.kerning import KerningGroup, KerningPair, Side


@dataclass(frozen=True, slots=True)
class FileNormalization:
    """Outcome of normalizing one glyph outline file.

    Attributes:
        path: Outline file that was rewritten
        points: Number of point elements visited
        defaulted: Number of coordinates that failed to parse and became zero
        all_even: Whether the verification pass found only even integers
    """

    path: Path
    points: int
    defaulted: int
    all_even: bool


@dataclass
class NormalizationReport:
    """Per-file outcomes of a normalization run."""

    package_root: Path
    files: list[FileNormalization] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def point_count(self) -> int:
        return sum(f.points for f in self.files)

    @property
    def defaulted_count(self) -> int:
        return sum(f.defaulted for f in self.files)

    @property
    def failed(self) -> list[FileNormalization]:
        """Files whose verification pass found odd or fractional coordinates."""
        return [f for f in self.files if not f.all_even]

    @property
    def all_even(self) -> bool:
        return not self.failed


@dataclass
class GroupListing:
    """Kerning groups partitioned by side, in stored order."""

    left: list[KerningGroup] = field(default_factory=list)
    right: list[KerningGroup] = field(default_factory=list)

    def for_side(self, side: Side) -> list[KerningGroup]:
        return self.left if side is Side.LEFT else self.right


@dataclass
class PairListing:
    """Kerning pairs in stored order."""

    pairs: list[KerningPair] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True, slots=True)
class GroupEditResult:
    """Outcome of adding or editing a kerning group.

    Attributes:
        group: Group as stored after the edit
        appended: True if members were merged into an existing group
        replaced: True if an existing entry was overwritten
    """

    group: KerningGroup
    appended: bool = False
    replaced: bool = False


@dataclass(frozen=True, slots=True)
class PairEditResult:
    """Outcome of adding a kerning pair.

    Attributes:
        pair: Pair as stored
        replaced: True if the pair already had a value that was overwritten
    """

    pair: KerningPair
    replaced: bool = False


@dataclass(frozen=True, slots=True)
class FontSummary:
    """Basic information about a font package."""

    family_name: str | None
    style_name: str | None
    version_major: int | None
    version_minor: int | None
    glyph_count: int
