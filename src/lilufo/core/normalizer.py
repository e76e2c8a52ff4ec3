"""Outline coordinate normalization.

Rewrites every point in every glyph outline file of a font package so that
its x and y coordinates are even integers, then checks the result.

Key components:
- OutlineNormalizer: Walks, rewrites and verifies outline trees
- normalize: Convenience wrapper using default settings
"""

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from lilufo.config import LilUfoSettings, get_default_settings
from lilufo.core.rounding import is_even, parse_coordinate, snap_to_grid
from lilufo.domain import FileNormalization, NormalizationReport
from lilufo.exceptions import InvalidCoordinateError
from lilufo.io import (
    iter_glyph_files,
    parse_glyph_file,
    serialize_tree,
    write_atomic,
    write_in_place,
)
from lilufo.utils import NormalizationLogger

POINT_TAG = "point"
COORDINATE_ATTRIBUTES = ("x", "y")


class OutlineNormalizer:
    """Snaps outline point coordinates to even integers.

    Each file is parsed, rewritten in memory, written back and then
    verified against the in-memory tree. Any read, parse or write failure
    stops the run; files already processed stay rewritten.

    Example:
        normalizer = OutlineNormalizer(get_default_settings())
        report = normalizer.normalize(Path("MyFont.ufo"))
        for outcome in report.files:
            print(outcome.path, outcome.all_even)
    """

    def __init__(
        self,
        settings: LilUfoSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the normalizer.

        Args:
            settings: Application settings (outline section is used)
            logger: Structured logger (defaults to the "lilufo" logger)
        """
        self.settings = settings or get_default_settings()
        self.config = self.settings.outline
        self.logger = logger or structlog.get_logger("lilufo")
        self.normalization_logger = NormalizationLogger(self.logger)

    def normalize(self, package_root: Path) -> NormalizationReport:
        """Normalize every outline file in the package.

        Args:
            package_root: Font package directory

        Returns:
            Report with one entry per processed file

        Raises:
            PackageLoadError: If package_root is not a directory
            GlyphFileError: If an outline file cannot be read or parsed
            GlyphWriteError: If an outline file cannot be written
            InvalidCoordinateError: If strict_numbers is set and a coordinate is unparsable
        """
        paths = iter_glyph_files(package_root, self.config)
        report = NormalizationReport(package_root=package_root)
        self.normalization_logger.log_run_start(package_root, len(paths))

        for path in paths:
            report.files.append(self.normalize_file(path))

        self.normalization_logger.log_run_complete()
        return report

    def normalize_file(self, path: Path) -> FileNormalization:
        """Round, rewrite and verify a single outline file."""
        tree = parse_glyph_file(path)
        points, defaulted = self.round_element(tree, path)

        data = serialize_tree(tree, indent=self.config.indent)
        if self.config.atomic_writes:
            write_atomic(path, data)
        else:
            write_in_place(path, data)

        all_even = self.verify_element(tree)
        self.normalization_logger.log_file_complete(path, points, all_even)
        return FileNormalization(
            path=path, points=points, defaulted=defaulted, all_even=all_even
        )

    def round_element(self, element: ET.Element, path: Path) -> tuple[int, int]:
        """Round point coordinates in element and all its descendants.

        Returns:
            Tuple of (points visited, coordinates defaulted to zero)
        """
        points = 0
        defaulted = 0

        if element.tag == POINT_TAG:
            points += 1
            for attribute in COORDINATE_ATTRIBUTES:
                value = element.get(attribute)
                if value is None:
                    continue
                number = parse_coordinate(value)
                if number is None:
                    if self.config.strict_numbers:
                        raise InvalidCoordinateError(str(path), attribute, value)
                    self.normalization_logger.log_coordinate_defaulted(path, attribute, value)
                    defaulted += 1
                    number = 0.0
                element.set(attribute, str(snap_to_grid(number, self.config.grid)))

        for child in element:
            child_points, child_defaulted = self.round_element(child, path)
            points += child_points
            defaulted += child_defaulted

        return points, defaulted

    def verify_element(self, element: ET.Element) -> bool:
        """Check that every point coordinate in the tree is on the grid."""
        if element.tag == POINT_TAG:
            for attribute in COORDINATE_ATTRIBUTES:
                value = element.get(attribute)
                if value is not None and not is_even(value, self.config.grid):
                    return False

        return all(self.verify_element(child) for child in element)


def normalize(
    package_root: Path, settings: LilUfoSettings | None = None
) -> NormalizationReport:
    """Normalize all outline files under package_root.

    See OutlineNormalizer.normalize for details.
    """
    return OutlineNormalizer(settings).normalize(package_root)
