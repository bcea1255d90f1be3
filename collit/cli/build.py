"""CLI command that builds a container from a textual literal and prints it."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.pretty import Pretty

from collit.errors import CollitError
from collit.literal import build_from_text

logger = logging.getLogger("collit.cli.build")


def _compose_literal(literal: str, options: Optional[List[str]]) -> str:
    """Prefix ``--option`` values onto the literal as an option list."""
    if not options:
        return literal
    body = literal.lstrip()
    if body.startswith("["):
        return f"[{', '.join(options)}, {body[1:]}"
    return f"[{', '.join(options)}] {literal}"


def build_command(args, console: Optional[Console] = None) -> int:
    """Execute the build command.

    Args:
        args: Parsed command-line arguments (kind, literal, option, literal_tokens).
        console: Rich console to print to; a fresh one is created when omitted.

    Returns:
        int: Exit code (0 on success, 2 for an invalid literal or option bag).
    """
    console = console or Console()
    text = _compose_literal(args.literal, getattr(args, "option", None))
    try:
        result = build_from_text(text, args.kind, literal=getattr(args, "literal_tokens", False))
    except CollitError as exc:
        logger.error("Cannot build %s: %s", args.kind, exc)
        return 2

    logger.info("Built %s with %d entries", args.kind, len(result))
    console.print(Pretty(result))
    return 0
