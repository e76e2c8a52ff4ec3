"""CLI application entry point for lilufo.

This module provides the main CLI interface using Typer. The global
``--ufo-path`` option selects the font package; each subcommand runs
exactly one operation on it.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from lilufo import __version__
from lilufo.cli.output import (
    console,
    print_basic_info,
    print_error,
    print_group_listing,
    print_group_result,
    print_normalization_report,
    print_notice,
    print_pair_listing,
    print_pair_result,
    print_step,
)
from lilufo.config import (
    KerningConfig,
    LilUfoSettings,
    LoggingConfig,
    LogLevel,
    OutlineConfig,
)
from lilufo.core import (
    OutlineNormalizer,
    add_group,
    add_pair,
    describe_font,
    edit_group,
    list_groups,
    list_pairs,
)
from lilufo.exceptions import LilUfoError, PackageLoadError, PackageSaveError
from lilufo.io import FontPackage, read_groups_plist, read_kerning_plist
from lilufo.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="lilufo",
    help="Inspect and edit kerning and outline coordinates of UFO font sources.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all subcommands."""

    ufo_path: Path
    logging: LoggingConfig
    quiet: bool = False

    def settings(
        self, strict_numbers: bool = False, require_known_glyphs: bool = False
    ) -> LilUfoSettings:
        """Build settings for one command invocation."""
        return LilUfoSettings(
            outline=OutlineConfig(strict_numbers=strict_numbers),
            kerning=KerningConfig(require_known_glyphs=require_known_glyphs),
            logging=self.logging,
        )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Lil' UFO[/bold blue] v{__version__}")
        raise typer.Exit()


def split_members(raw: str) -> list[str]:
    """Split a comma-separated member list, trimming whitespace and dropping empties."""
    return [part.strip() for part in raw.split(",") if part.strip()]


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report lilufo errors and exit with status 1."""
    try:
        yield
    except typer.Exit:
        raise
    except PackageLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except PackageSaveError as e:
        print_error(f"Could not save font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except LilUfoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    ufo_path: Annotated[
        Path,
        typer.Option(
            "--ufo-path",
            "-u",
            help="Path to the UFO font package",
            show_default=False,
        ),
    ],
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and edit a UFO font package."""
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level.value,
        file_level=logging_config.file_log_level.value,
        quiet=quiet,
    )
    ctx.obj = CliState(ufo_path=ufo_path, logging=logging_config, quiet=quiet)


@app.command("basic-info")
def basic_info(ctx: typer.Context) -> None:
    """Display basic font information."""
    state: CliState = ctx.obj
    with handle_errors():
        package = FontPackage.load(state.ufo_path)
        print_basic_info(describe_font(package))


@app.command("round-to-even")
def round_to_even(
    ctx: typer.Context,
    strict_numbers: Annotated[
        bool,
        typer.Option(
            "--strict-numbers",
            help="Fail on unparsable coordinates instead of treating them as zero",
        ),
    ] = False,
) -> None:
    """Round all outline points to the nearest even integer."""
    state: CliState = ctx.obj
    with handle_errors():
        if not state.quiet:
            print_step("Rounding outline points")
        normalizer = OutlineNormalizer(state.settings(strict_numbers=strict_numbers))
        report = normalizer.normalize(state.ufo_path)
        print_normalization_report(report, quiet=state.quiet)


@app.command("show-kerning-groups")
def show_kerning_groups(ctx: typer.Context) -> None:
    """Display all kerning groups."""
    state: CliState = ctx.obj
    with handle_errors():
        if not state.ufo_path.is_dir():
            raise PackageLoadError(str(state.ufo_path), "package directory does not exist")
        groups = read_groups_plist(state.ufo_path)
        if groups is None:
            print_notice("No groups.plist found in UFO")
            return
        print_group_listing(list_groups(groups))


@app.command("show-kerning")
def show_kerning(ctx: typer.Context) -> None:
    """Display all kerning pairs."""
    state: CliState = ctx.obj
    with handle_errors():
        if not state.ufo_path.is_dir():
            raise PackageLoadError(str(state.ufo_path), "package directory does not exist")
        kerning = read_kerning_plist(state.ufo_path)
        if kerning is None:
            print_notice("No kerning.plist found in UFO")
            return
        print_pair_listing(list_pairs(kerning))


NameOption = Annotated[
    str,
    typer.Option("--name", help="Group name without the public.kern1./public.kern2. prefix"),
]
SideOption = Annotated[
    str,
    typer.Option("--side", help="Group side (left|right)"),
]
MembersOption = Annotated[
    str,
    typer.Option("--members", help="Comma-separated list of glyph names"),
]
RequireKnownOption = Annotated[
    bool,
    typer.Option(
        "--require-known-glyphs",
        help="Reject glyph names that are not in the font",
    ),
]


@app.command("add-kerning-group")
def add_kerning_group(
    ctx: typer.Context,
    name: NameOption,
    side: SideOption,
    members: MembersOption,
    require_known_glyphs: RequireKnownOption = False,
) -> None:
    """Add a new kerning group (replaces a group with the same name)."""
    state: CliState = ctx.obj
    with handle_errors():
        settings = state.settings(require_known_glyphs=require_known_glyphs)
        package = FontPackage.load(state.ufo_path)
        result = add_group(package, name, side, split_members(members), config=settings.kerning)
        if not state.quiet:
            print_group_result(result, "added")


@app.command("edit-kerning-group")
def edit_kerning_group(
    ctx: typer.Context,
    name: NameOption,
    side: SideOption,
    members: MembersOption,
    append: Annotated[
        bool,
        typer.Option(
            "--append",
            help="Merge members into the group (sorted, without duplicates) instead of replacing",
        ),
    ] = False,
    require_known_glyphs: RequireKnownOption = False,
) -> None:
    """Replace or extend the members of an existing kerning group."""
    state: CliState = ctx.obj
    with handle_errors():
        settings = state.settings(require_known_glyphs=require_known_glyphs)
        package = FontPackage.load(state.ufo_path)
        result = edit_group(
            package,
            name,
            side,
            split_members(members),
            append=append,
            config=settings.kerning,
        )
        if not state.quiet:
            print_group_result(result, "updated")


@app.command("add-kerning-pair")
def add_kerning_pair(
    ctx: typer.Context,
    first: Annotated[
        str,
        typer.Option("--first", help="First glyph, or @Group for a left group"),
    ],
    second: Annotated[
        str,
        typer.Option("--second", help="Second glyph, or @Group for a right group"),
    ],
    value: Annotated[
        int,
        typer.Option("--value", help="Kerning value in font units"),
    ],
    require_known_glyphs: RequireKnownOption = False,
) -> None:
    """Add or update a kerning pair."""
    state: CliState = ctx.obj
    with handle_errors():
        settings = state.settings(require_known_glyphs=require_known_glyphs)
        package = FontPackage.load(state.ufo_path)
        result = add_pair(package, first, second, value, config=settings.kerning)
        if not state.quiet:
            print_pair_result(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
