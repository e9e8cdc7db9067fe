"""CLI application entry point for fontgroups.

This module provides the main CLI interface using Typer. Commands are
grouped as ``fonts``, ``groups`` and ``db``; each maps onto one
FontService or JsonStore call.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from fontgroups import __version__
from fontgroups.cli.output import (
    console,
    print_error,
    print_font_detail,
    print_font_uploaded,
    print_fonts,
    print_group_detail,
    print_groups,
    print_ok,
    print_warning,
)
from fontgroups.config import FontGroupsSettings, LoggingConfig, StorageConfig
from fontgroups.core import FontService, validate_upload
from fontgroups.exceptions import FontGroupsError, InvalidFontFileError
from fontgroups.io import FontReader
from fontgroups.utils import configure_logging

# Create the Typer apps
app = typer.Typer(
    name="fontgroups",
    help="Upload TTF fonts and organize them into font groups.",
    add_completion=False,
    no_args_is_help=True,
)
fonts_app = typer.Typer(help="Upload, list, preview and delete fonts.", no_args_is_help=True)
groups_app = typer.Typer(help="Create, list, update and delete font groups.", no_args_is_help=True)
db_app = typer.Typer(help="Back up and restore the database.", no_args_is_help=True)

app.add_typer(fonts_app, name="fonts")
app.add_typer(groups_app, name="groups")
app.add_typer(db_app, name="db")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fontgroups[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    home: Annotated[
        Path,
        typer.Option(
            "--home",
            envvar="FONTGROUPS_HOME",
            help="Directory holding data/database.json and uploads/",
            file_okay=False,
        ),
    ] = Path("."),
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on an unreadable database instead of treating it as empty",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
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
    """Upload TTF fonts and organize them into font groups."""
    settings = FontGroupsSettings(
        storage=StorageConfig(home=home, recover_corrupt_database=not strict),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = FontService.from_settings(settings)


def _service(ctx: typer.Context) -> FontService:
    return ctx.find_root().obj


@contextmanager
def _handle_errors() -> Iterator[None]:
    """Turn fontgroups errors into an error message and exit code 1."""
    try:
        yield
    except FontGroupsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


# -------------------- fonts --------------------


@fonts_app.command("upload")
def upload_fonts(
    ctx: typer.Context,
    files: Annotated[
        list[Path],
        typer.Argument(help="TTF files to upload", show_default=False),
    ],
) -> None:
    """Upload one or more TTF fonts.

    Files whose name does not end in .ttf are rejected. Every valid file is
    uploaded even if another one is rejected.
    """
    service = _service(ctx)
    failed = 0

    with _handle_errors():
        for path in files:
            try:
                content = validate_upload(path)
            except InvalidFontFileError as e:
                print_error(e.reason, details=str(path))
                failed += 1
                continue

            font = service.save_font(content, path.name)
            print_font_uploaded(font)

    if failed:
        raise typer.Exit(code=1)


@fonts_app.command("list")
def list_fonts(ctx: typer.Context) -> None:
    """List all uploaded fonts."""
    with _handle_errors():
        print_fonts(_service(ctx).get_all_fonts())


@fonts_app.command("show")
def show_font(
    ctx: typer.Context,
    font_id: Annotated[str, typer.Argument(help="Font ID", show_default=False)],
    preview: Annotated[
        bool,
        typer.Option("--preview/--no-preview", help="Read family and glyph details from the file"),
    ] = True,
) -> None:
    """Show a font's details."""
    service = _service(ctx)
    with _handle_errors():
        font = service.get_font(font_id)
    if font is None:
        print_error("Font not found", details=font_id)
        raise typer.Exit(code=1)

    if not preview:
        print_font_detail(font)
        return

    try:
        with FontReader(service.font_file_path(font)) as reader:
            print_font_detail(
                font,
                family_name=reader.family_name,
                font_type=reader.format,
                glyph_count=reader.glyph_count,
                upm=reader.units_per_em,
            )
    except Exception as e:
        print_font_detail(font)
        print_warning(f"Preview unavailable: {e}")


@fonts_app.command("delete")
def delete_font(
    ctx: typer.Context,
    font_id: Annotated[str, typer.Argument(help="Font ID", show_default=False)],
) -> None:
    """Delete a font and remove it from every font group."""
    with _handle_errors():
        result = _service(ctx).delete_font(font_id)

    if not result:
        print_error("Font not found", details=font_id)
        raise typer.Exit(code=1)

    if not result.binary_removed:
        print_warning("Stored font file could not be removed")
    print_ok("Font deleted successfully")


# -------------------- groups --------------------


@groups_app.command("create")
def create_group(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Group name", show_default=False)],
    font_ids: Annotated[
        list[str],
        typer.Argument(help="IDs of at least two fonts", show_default=False),
    ],
) -> None:
    """Create a font group from two or more fonts."""
    with _handle_errors():
        group = _service(ctx).create_font_group(name, font_ids)

    if group is None:
        print_error(
            "Font group must have at least 2 fonts",
            details="Every ID must belong to an uploaded font.",
        )
        raise typer.Exit(code=1)

    print_ok("Font group created successfully")
    print_group_detail(group)


@groups_app.command("list")
def list_groups(ctx: typer.Context) -> None:
    """List all font groups."""
    with _handle_errors():
        print_groups(_service(ctx).get_all_font_groups())


@groups_app.command("show")
def show_group(
    ctx: typer.Context,
    group_id: Annotated[str, typer.Argument(help="Group ID", show_default=False)],
) -> None:
    """Show a font group and its fonts."""
    with _handle_errors():
        group = _service(ctx).get_font_group(group_id)

    if group is None:
        print_error("Font group not found", details=group_id)
        raise typer.Exit(code=1)
    print_group_detail(group)


@groups_app.command("update")
def update_group(
    ctx: typer.Context,
    group_id: Annotated[str, typer.Argument(help="Group ID", show_default=False)],
    font_ids: Annotated[
        list[str],
        typer.Argument(help="IDs of at least two fonts", show_default=False),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="New group name (default: keep current)"),
    ] = None,
) -> None:
    """Replace a font group's fonts and optionally rename it."""
    service = _service(ctx)
    with _handle_errors():
        if name is None:
            current = service.get_font_group(group_id)
            name = current.name if current is not None else ""
        group = service.update_font_group(group_id, name, font_ids)

    if group is None:
        print_error("Font group not found or invalid data", details=group_id)
        raise typer.Exit(code=1)

    print_ok("Font group updated successfully")
    print_group_detail(group)


@groups_app.command("delete")
def delete_group(
    ctx: typer.Context,
    group_id: Annotated[str, typer.Argument(help="Group ID", show_default=False)],
) -> None:
    """Delete a font group. Its fonts are kept."""
    with _handle_errors():
        deleted = _service(ctx).delete_font_group(group_id)

    if not deleted:
        print_error("Font group not found", details=group_id)
        raise typer.Exit(code=1)
    print_ok("Font group deleted successfully")


# -------------------- db --------------------


@db_app.command("backup")
def backup_database(ctx: typer.Context) -> None:
    """Write a timestamped copy of the database next to it."""
    with _handle_errors():
        path = _service(ctx).store.backup()
    print_ok(f"Backup written to {path}")


@db_app.command("restore")
def restore_database(
    ctx: typer.Context,
    backup_file: Annotated[
        Path,
        typer.Argument(help="Backup file to restore", show_default=False),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
) -> None:
    """Replace the database with the contents of a backup file."""
    if not yes:
        typer.confirm("This overwrites every font and group record. Continue?", abort=True)

    with _handle_errors():
        _service(ctx).store.restore(backup_file)
    print_ok(f"Database restored from {backup_file}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
