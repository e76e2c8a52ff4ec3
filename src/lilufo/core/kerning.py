"""Kerning group and pair operations.

Operates on any font object exposing ``groups`` (group key -> glyph names),
``kerning`` (first key -> second key -> value) and ``save()``, such as
:class:`lilufo.io.FontPackage`. Every operation validates its input before
touching the font and saves at most once.

Key functions:
- list_groups / list_pairs: Decode stored dictionaries for display
- add_group / edit_group: Create, replace or extend a kerning group
- add_pair: Set a kerning value between glyphs and/or groups
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

import structlog

from lilufo.config import KerningConfig
from lilufo.domain import (
    GroupEditResult,
    GroupListing,
    KerningGroup,
    KerningKey,
    KerningPair,
    PairEditResult,
    PairListing,
    Side,
    validate_glyph_name,
    validate_glyph_names,
)
from lilufo.exceptions import GlyphNotFoundError, GroupNotFoundError


def _get_logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(__name__)


class KerningFont(Protocol):
    """Font interface required by the kerning operations."""

    groups: dict[str, list[str]]
    kerning: dict[str, dict[str, int | float]]

    def save(self) -> None: ...


def _integral_value(value: Any) -> int | None:
    """Return value as an int if it is a whole number, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def list_groups(groups: Mapping[str, Any]) -> GroupListing:
    """Partition stored groups into left and right kerning groups.

    Keys without a kerning prefix are omitted. Non-string members are
    dropped from the listing.

    Args:
        groups: Group dictionary as stored in groups.plist

    Returns:
        Groups by side with prefixes stripped, in stored order
    """
    listing = GroupListing()
    for key, members in groups.items():
        side = Side.from_storage_key(key)
        if side is None or not isinstance(members, (list, tuple)):
            continue
        group = KerningGroup(
            name=KerningKey.from_storage(key, side).name,
            side=side,
            members=tuple(m for m in members if isinstance(m, str)),
        )
        listing.for_side(side).append(group)
    return listing


def list_pairs(kerning: Mapping[str, Any]) -> PairListing:
    """Flatten stored kerning into pairs with decoded keys.

    Values that are not whole numbers are skipped.

    Args:
        kerning: Kerning dictionary as stored in kerning.plist

    Returns:
        Pairs in stored order
    """
    listing = PairListing()
    for first, seconds in kerning.items():
        if not isinstance(seconds, Mapping):
            continue
        first_key = KerningKey.from_storage(first, Side.LEFT)
        for second, raw_value in seconds.items():
            value = _integral_value(raw_value)
            if value is None:
                continue
            listing.pairs.append(
                KerningPair(
                    first=first_key,
                    second=KerningKey.from_storage(second, Side.RIGHT),
                    value=value,
                )
            )
    return listing


def _check_known_glyphs(font: Any, names: Iterable[str]) -> None:
    known = font.glyph_names
    for name in names:
        if name not in known:
            raise GlyphNotFoundError(name)


def _prepare_members(
    font: Any, members: Sequence[str], config: KerningConfig
) -> list[str]:
    validated = validate_glyph_names(members)
    if config.require_known_glyphs:
        _check_known_glyphs(font, validated)
    return validated


def add_group(
    font: KerningFont,
    name: str,
    side: str | Side,
    members: Sequence[str],
    config: KerningConfig | None = None,
) -> GroupEditResult:
    """Create a kerning group, overwriting any group with the same key.

    Members are stored in the given order without deduplication.

    Args:
        font: Font to modify and save
        name: Group name without prefix
        side: "left" or "right"
        members: Glyph names in the group
        config: Kerning settings

    Returns:
        The stored group

    Raises:
        InvalidSideError: If side is not left or right
        InvalidGlyphNameError: If the group name or a member name is invalid
        GlyphNotFoundError: If require_known_glyphs is set and a member is unknown
    """
    config = config or KerningConfig()
    group_side = Side.parse(side)
    validate_glyph_name(name)
    validated = _prepare_members(font, members, config)

    group = KerningGroup(name=name, side=group_side, members=tuple(validated))
    replaced = group.key in font.groups
    font.groups[group.key] = validated
    font.save()

    _get_logger().info(
        "Kerning group added",
        group=group.key,
        members=len(validated),
        replaced=replaced,
    )
    return GroupEditResult(group=group, replaced=replaced)


def edit_group(
    font: KerningFont,
    name: str,
    side: str | Side,
    members: Sequence[str],
    append: bool = False,
    config: KerningConfig | None = None,
) -> GroupEditResult:
    """Replace or extend the members of an existing kerning group.

    In replace mode the members are stored as given. In append mode they
    are merged with the existing members and the result is sorted with
    duplicates removed.

    Raises:
        InvalidSideError: If side is not left or right
        InvalidGlyphNameError: If the group name or a member name is invalid
        GroupNotFoundError: If the group does not exist
        GlyphNotFoundError: If require_known_glyphs is set and a member is unknown
    """
    config = config or KerningConfig()
    group_side = Side.parse(side)
    validate_glyph_name(name)
    key = KerningKey.group(name).to_storage(group_side)
    if key not in font.groups:
        raise GroupNotFoundError(name, group_side.value)
    validated = _prepare_members(font, members, config)

    if append:
        stored = sorted(set(font.groups[key]) | set(validated))
    else:
        stored = validated

    font.groups[key] = stored
    font.save()

    _get_logger().info(
        "Kerning group updated",
        group=key,
        members=len(stored),
        append=append,
    )
    return GroupEditResult(
        group=KerningGroup(name=name, side=group_side, members=tuple(stored)),
        appended=append,
        replaced=True,
    )


def _resolve_pair_key(
    font: Any, token: str, side: Side, config: KerningConfig
) -> KerningKey:
    """Parse and validate one element of a pair."""
    key = KerningKey.parse(token)
    validate_glyph_name(key.name)
    if key.is_group:
        if key.to_storage(side) not in font.groups:
            raise GroupNotFoundError(key.name, side.value)
    elif config.require_known_glyphs:
        _check_known_glyphs(font, [key.name])
    return key


def add_pair(
    font: KerningFont,
    first: str,
    second: str,
    value: int,
    config: KerningConfig | None = None,
) -> PairEditResult:
    """Set the kerning value for a pair, creating it if needed.

    ``@Name`` as the first element refers to the left group ``Name`` and as
    the second element to the right group ``Name``. Both must exist. Bare
    glyph names are only checked against the glyph set when
    require_known_glyphs is set.

    Args:
        font: Font to modify and save
        first: First element, a glyph name or ``@Group``
        second: Second element, a glyph name or ``@Group``
        value: Kerning value in font units
        config: Kerning settings

    Returns:
        The stored pair

    Raises:
        InvalidGlyphNameError: If an element name is invalid
        GroupNotFoundError: If a referenced group does not exist on its side
        GlyphNotFoundError: If require_known_glyphs is set and a glyph is unknown
    """
    config = config or KerningConfig()
    first_key = _resolve_pair_key(font, first, Side.LEFT, config)
    second_key = _resolve_pair_key(font, second, Side.RIGHT, config)

    first_stored = first_key.to_storage(Side.LEFT)
    second_stored = second_key.to_storage(Side.RIGHT)
    seconds = font.kerning.get(first_stored)
    if seconds is None:
        replaced = False
        font.kerning[first_stored] = {second_stored: value}
    else:
        replaced = second_stored in seconds
        seconds[second_stored] = value
    font.save()

    _get_logger().info(
        "Kerning pair added",
        first=first_stored,
        second=second_stored,
        value=value,
        replaced=replaced,
    )
    return PairEditResult(
        pair=KerningPair(first=first_key, second=second_key, value=value),
        replaced=replaced,
    )
