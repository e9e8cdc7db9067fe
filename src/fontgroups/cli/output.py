"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fontgroups.domain import Font, FontGroup, format_timestamp

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _stamp(value: datetime | None) -> str:
    return format_timestamp(value) if value is not None else "-"


def print_ok(message: str) -> None:
    """Print a success line."""
    console.print(f"[bold green]{SYM_OK}[/bold green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning line."""
    console.print(f"[yellow]{SYM_DOT} {escape(message)}[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")


def print_font_uploaded(font: Font) -> None:
    """Print the result of a single upload."""
    line = Text(f"{SYM_OK} ", style="bold green")
    line.append(font.original_name, style="bold")
    line.append(f" {SYM_DOT} {font.id}")
    console.print(line)


def print_fonts(fonts: list[Font]) -> None:
    """Print all fonts as a table.

    Args:
        fonts: Fonts in stored order
    """
    if not fonts:
        console.print("No fonts uploaded yet.")
        return

    table = Table(title=f"{len(fonts)} fonts", title_justify="left")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("File")
    table.add_column("Uploaded")
    for font in fonts:
        table.add_row(font.id, escape(font.name), escape(font.original_name), _stamp(font.uploaded_at))
    console.print(table)


def print_font_detail(
    font: Font,
    family_name: str | None = None,
    font_type: str | None = None,
    glyph_count: int | None = None,
    upm: int | None = None,
) -> None:
    """Print one font's metadata and, when available, its preview details.

    Args:
        font: Font record
        family_name: Family name read from the font file
        font_type: Font format type (e.g., "TrueType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    console.print(f"\n[bold]{escape(font.name)}[/bold]")
    console.print(f"  ID         {font.id}")
    console.print(f"  Uploaded   {escape(font.original_name)} {SYM_DOT} {_stamp(font.uploaded_at)}")
    console.print(f"  Path       {font.path}")
    if font_type is not None:
        console.print(f"  Family     {escape(family_name or '-')} ({font_type})")
        console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_groups(groups: list[FontGroup]) -> None:
    """Print all font groups as a table.

    Args:
        groups: Groups in stored order
    """
    if not groups:
        console.print("No font groups yet.")
        return

    table = Table(title=f"{len(groups)} font groups", title_justify="left")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Fonts")
    table.add_column("Count", justify="right")
    for group in groups:
        table.add_row(
            group.id,
            escape(group.name),
            escape(", ".join(font.name for font in group.fonts)),
            str(len(group.fonts)),
        )
    console.print(table)


def print_group_detail(group: FontGroup) -> None:
    """Print one font group with its member fonts."""
    console.print(f"\n[bold]{escape(group.name)}[/bold]")
    console.print(f"  ID         {group.id}")
    console.print(f"  Created    {_stamp(group.created_at)}")
    console.print(f"  Updated    {_stamp(group.updated_at)}")
    console.print(f"  {len(group.fonts)} fonts")
    for font in group.fonts:
        console.print(f"    {SYM_STEP} {escape(font.name)} {SYM_DOT} {font.id}")
