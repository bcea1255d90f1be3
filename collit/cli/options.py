"""CLI command listing the recognized options and their accepted values."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from collit.containers import list_strategies
from collit.options import ANY, REGULAR, list_key_maps


def options_command(args, console: Optional[Console] = None) -> int:
    """Print the option names accepted by the unordered builders."""
    console = console or Console()

    table = Table(title="collit options")
    table.add_column("name")
    table.add_column("value")
    table.add_column("default")
    table.add_row("capacity", "non-negative integer (0 = entry count)", "0")
    table.add_row(
        "hasher",
        ", ".join([REGULAR, ANY] + list_strategies()),
        REGULAR,
    )
    table.add_row("key_map", ", ".join(list_key_maps()), "identity")

    console.print(table)
    return 0
