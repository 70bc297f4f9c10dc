"""Shell completion: candidate generation and installation into shell rc files."""

from __future__ import annotations

import enum
import os
import sys
from pathlib import Path

from qwak.config import ensure_config_dir, get_config_dir, load_aliases

COMMANDS = (
    "--set",
    "--agent",
    "--list",
    "--remove",
    "--reset",
    "--setup-completion",
    "--help",
)

FIRST_RUN_MARKER = ".first_run_complete"


class Shell(enum.Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    def __str__(self) -> str:
        return self.name.capitalize()


_SCRIPTS = {
    Shell.BASH: """
_qwk_complete() {
    local cur="${COMP_WORDS[COMP_CWORD]}"
    COMPREPLY=($(qwk --complete "$cur" 2>/dev/null))
}
complete -F _qwk_complete qwk
""",
    Shell.ZSH: """
_qwk_complete() {
    local completions
    completions=($(qwk --complete "$1" 2>/dev/null))
    compadd -a completions
}
compdef _qwk_complete qwk
""",
    Shell.FISH: """
function __qwk_complete
    qwk --complete (commandline -ct) 2>/dev/null
end
complete -c qwk -f -a "(__qwk_complete)"
""",
}


def generate_completions(partial: str | None) -> list[str]:
    """Print the sorted completions matching ``partial``, one per line, and return them."""
    completions = [*load_aliases(), *COMMANDS]
    if partial:
        completions = [c for c in completions if c.startswith(partial)]
    completions.sort()
    for completion in completions:
        print(completion)
    return completions


def detect_shell() -> Shell | None:
    """Guess the user's shell from the ``SHELL`` environment variable."""
    shell = os.environ.get("SHELL")
    if shell is None:
        return None
    for candidate in (Shell.BASH, Shell.ZSH, Shell.FISH):
        if candidate.value in shell:
            return candidate
    return None


def get_completion_script(shell: Shell) -> str:
    return _SCRIPTS[shell]


def get_shell_rc_file(shell: Shell) -> Path | None:
    """Return the rc file the completion script belongs in, or ``None``."""
    home = os.environ.get("HOME")
    if home is None:
        return None
    home_path = Path(home)
    if shell is Shell.BASH:
        bashrc = home_path / ".bashrc"
        return bashrc if bashrc.exists() else home_path / ".bash_profile"
    if shell is Shell.ZSH:
        return home_path / ".zshrc"
    fish_dir = home_path / ".config" / "fish"
    try:
        fish_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return fish_dir / "config.fish"


def is_completion_installed(shell: Shell) -> bool:
    rc_file = get_shell_rc_file(shell)
    if rc_file is None or not rc_file.exists():
        return False
    try:
        content = rc_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        content = ""
    return "_qwk_complete" in content or "__qwk_complete" in content


def install_completion(shell: Shell) -> None:
    """Append the completion script for ``shell`` to its rc file."""
    rc_file = get_shell_rc_file(shell)
    if rc_file is None:
        raise FileNotFoundError("Could not determine shell RC file")
    addition = f"# qwk autocompletion setup\n{get_completion_script(shell)}"
    with rc_file.open("a", encoding="utf-8") as handle:
        handle.write(addition + "\n")


def setup_completion_for_current_shell() -> None:
    """Install completion for the detected shell unless it is already there."""
    shell = detect_shell()
    if shell is None:
        raise FileNotFoundError("Could not detect current shell")

    if is_completion_installed(shell):
        print(f"Autocompletion is already set up for {shell}")
        return

    install_completion(shell)

    print(f"Autocompletion set up for {shell.value}!")
    if shell is Shell.FISH:
        print("Restart your shell or run 'source ~/.config/fish/config.fish' to activate.")
    else:
        print(f"Restart your shell or run 'source ~/.{shell.value}rc' to activate.")


def is_first_run() -> bool:
    return not (get_config_dir() / FIRST_RUN_MARKER).exists()


def mark_first_run_complete() -> None:
    ensure_config_dir()
    (get_config_dir() / FIRST_RUN_MARKER).write_text("", encoding="utf-8")


def handle_first_run() -> None:
    """On the first run, try to set up completion and record that it happened."""
    if not is_first_run():
        return
    print("Welcome to qwk! Setting up autocompletion...")
    try:
        setup_completion_for_current_shell()
    except OSError as error:
        print(f"Note: Could not set up autocompletion automatically: {error}", file=sys.stderr)
        print(
            "You can set it up manually later with: qwk --setup-completion",
            file=sys.stderr,
        )
    try:
        mark_first_run_complete()
    except OSError as error:
        print(f"Warning: Could not mark first run as complete: {error}", file=sys.stderr)