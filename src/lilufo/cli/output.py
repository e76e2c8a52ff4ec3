"""Rich console output helpers for the CLI.

This module renders the structured reports returned by the core
operations. Nothing in lilufo.core prints.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from lilufo.domain import (
    FontSummary,
    GroupEditResult,
    GroupListing,
    KerningGroup,
    NormalizationReport,
    PairEditResult,
    PairListing,
    Side,
)

console = Console(soft_wrap=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_ARROW = "→"  # Pair/group mapping

BANNER = (
    "    .     *     .           .     \n"
    "   .-----.                        \n"
    " _/___@_@_\\_              .      \n"
    "(___________)      *              \n"
    "                                  \n"
    "Lil' UFO"
)


def print_banner() -> None:
    """Print the application banner."""
    console.print(Text(BANNER))


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {escape(message)}")


def print_notice(message: str) -> None:
    """Print a plain informational line."""
    console.print(Text(message))


def print_basic_info(summary: FontSummary) -> None:
    """Print font naming, version and glyph count.

    Args:
        summary: Font information collected from the package
    """
    print_banner()
    console.print()
    console.print("[bold]Font Information:[/bold]")
    console.print(Text(f"Family Name: {summary.family_name or 'N/A'}"))
    console.print(Text(f"Style Name: {summary.style_name or 'N/A'}"))
    console.print(Text(f"Version Major: {summary.version_major or 0}"))
    console.print(Text(f"Version Minor: {summary.version_minor or 0}"))
    console.print(Text(f"Number of Glyphs: {summary.glyph_count}"))


def print_normalization_report(report: NormalizationReport, quiet: bool = False) -> None:
    """Print one pass/fail line per outline file and a summary.

    Args:
        report: Normalization report
        quiet: Only print files that failed verification
    """
    for outcome in report.files:
        if outcome.all_even:
            if not quiet:
                console.print(Text(f"{outcome.path}: All points rounded to even integers"))
        else:
            line = Text(f"{outcome.path}: ")
            line.append("Warning - Not all points are even integers", style="yellow")
            console.print(line)

    if quiet:
        return

    style = "green" if report.all_even else "red"
    console.print(
        f"\n[bold {style}]{SYM_OK if report.all_even else SYM_ERR}[/bold {style}] "
        f"{report.file_count} files · {report.point_count} points · "
        f"{report.defaulted_count} unparsable coordinates"
    )


def _group_line(group: KerningGroup) -> Text:
    return Text(f"@{group.name} {SYM_ARROW} {', '.join(group.members)}")


def print_group_listing(listing: GroupListing) -> None:
    """Print kerning groups partitioned by side.

    Args:
        listing: Groups by side
    """
    console.print("[bold]Kerning Groups:[/bold]")
    console.print("---------------")
    for title, side in (("Left", Side.LEFT), ("Right", Side.RIGHT)):
        console.print(Text(f"\n{title} Groups (prefix: {side.prefix.rstrip('.')}):"))
        for group in listing.for_side(side):
            console.print(_group_line(group))


def print_pair_listing(listing: PairListing) -> None:
    """Print kerning pairs as ``first second → value``.

    Args:
        listing: Kerning pairs
    """
    console.print("[bold]Kerning Pairs:[/bold]")
    console.print("--------------")
    for pair in listing.pairs:
        console.print(
            Text(f"{pair.first.display()} {pair.second.display()} {SYM_ARROW} {pair.value}")
        )


def print_group_result(result: GroupEditResult, action: str) -> None:
    """Print confirmation of a group edit.

    Args:
        result: Group edit outcome
        action: Past-tense verb, e.g. "added" or "updated"
    """
    line = Text(f"{SYM_OK} Successfully {action} kerning group ", style="green")
    line.append(f"'{result.group.name}'", style="bold")
    console.print(line)
    console.print(_group_line(result.group))


def print_pair_result(result: PairEditResult) -> None:
    """Print confirmation of a pair edit."""
    pair = result.pair
    verb = "updated" if result.replaced else "added"
    console.print(Text(f"{SYM_OK} Successfully {verb} kerning pair", style="green"))
    console.print(
        Text(f"{pair.first.display()} {pair.second.display()} {SYM_ARROW} {pair.value}")
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
