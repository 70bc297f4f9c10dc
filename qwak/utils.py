"""Small helpers shared by the command-line interface."""

from __future__ import annotations

import shlex
import sys
from datetime import datetime, timezone


def parse_agent_command(agent_str: str) -> tuple[str, list[str]]:
    """Split an agent command line into the program and its default arguments.

    If the string cannot be split (for example, an unbalanced quote) or is
    empty, the whole string is returned as the program with no arguments.
    """
    try:
        parts = shlex.split(agent_str)
    except ValueError:
        parts = []
    if not parts:
        return agent_str, []
    command, *args = parts
    return command, args


def truncate_prompt(prompt: str, max_length: int) -> str:
    """Collapse whitespace in ``prompt`` and cut it to ``max_length`` characters.

    A truncated result ends with ``...`` and is at most ``max_length`` long.
    """
    cleaned = " ".join(prompt.split())
    if len(cleaned) <= max_length:
        return cleaned
    return f"{cleaned[:max(max_length - 3, 0)]}..."


def get_current_datetime() -> str:
    """Return the current UTC time formatted as ``YYYYMMDD_HHMMSS``."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def confirm_reset() -> bool:
    """Ask on the terminal whether all shortcuts should be removed."""
    sys.stdout.write(
        "This will remove all shortcuts (a backup will be created). "
        "Are you sure? (y/N): "
    )
    sys.stdout.flush()
    try:
        answer = sys.stdin.readline()
    except OSError:
        return False
    return answer.strip().lower() in ("y", "yes")


def read_prompt_from_stdin() -> str:
    """Read all of standard input and return it without surrounding whitespace."""
    return sys.stdin.read().strip()


def parse_agent_args(args: list[str]) -> list[str]:
    """Return the per-call agent arguments that follow ``--`` in ``args``.

    ``args`` is the full argument vector (program name, shortcut, ...).
    Raises ``ValueError`` when there are too few arguments or extra
    arguments are given without a ``--`` separator.
    """
    if len(args) < 2:
        raise ValueError("Not enough arguments")
    if len(args) == 2:
        return []
    try:
        separator = args.index("--")
    except ValueError:
        raise ValueError("Invalid format - use -- to separate agent args") from None
    return list(args[separator + 1:])