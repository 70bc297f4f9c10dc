"""Storage of aliases and the agent command under ``~/.config/qwk``."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path

from qwak.utils import get_current_datetime

DEFAULT_AGENT = "claude"


def get_config_dir() -> Path:
    """Return the configuration directory inside the user's home."""
    home = os.environ.get("HOME")
    if home is None:
        raise RuntimeError("HOME environment variable not set")
    return Path(home) / ".config" / "qwk"


def ensure_config_dir() -> Path:
    """Create the configuration directory if needed and return it."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_aliases_file() -> Path:
    return get_config_dir() / "aliases.json"


def get_agent_file() -> Path:
    return get_config_dir() / "agent"


def load_aliases() -> dict[str, str]:
    """Load the stored aliases; a missing or unreadable file gives an empty dict."""
    aliases_file = get_aliases_file()
    if not aliases_file.exists():
        return {}
    try:
        data = json.loads(aliases_file.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict) or not all(
        isinstance(value, str) for value in data.values()
    ):
        return {}
    return data


def save_aliases(aliases: dict[str, str]) -> None:
    """Write ``aliases`` to the aliases file as pretty-printed JSON."""
    ensure_config_dir()
    content = json.dumps(aliases, indent=2, ensure_ascii=False)
    get_aliases_file().write_text(content, encoding="utf-8")


def get_agent() -> str:
    """Return the configured agent command, ``claude`` by default."""
    agent_file = get_agent_file()
    if not agent_file.exists():
        return DEFAULT_AGENT
    try:
        return agent_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return DEFAULT_AGENT


def set_agent(command: str) -> None:
    """Store ``command`` as the agent command."""
    ensure_config_dir()
    get_agent_file().write_text(command, encoding="utf-8")


def create_aliases_backup() -> str | None:
    """Copy the aliases file to a timestamped backup.

    Returns the backup path, or ``None`` when there is no aliases file.
    """
    aliases_file = get_aliases_file()
    if not aliases_file.exists():
        return None
    config_dir = ensure_config_dir()
    backup_file = config_dir / f"aliases_backup_{get_current_datetime()}.json"
    shutil.copyfile(aliases_file, backup_file)
    return str(backup_file)