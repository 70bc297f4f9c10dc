"""Command-line entry point: run stored shortcuts and manage them."""

from __future__ import annotations

import argparse
import subprocess
import sys

from qwak.completion import (
    generate_completions,
    handle_first_run,
    setup_completion_for_current_shell,
)
from qwak.config import (
    create_aliases_backup,
    get_agent,
    get_aliases_file,
    load_aliases,
    save_aliases,
    set_agent,
)
from qwak.utils import (
    confirm_reset,
    parse_agent_command,
    read_prompt_from_stdin,
    truncate_prompt,
)

PREVIEW_LENGTH = 60


def list_aliases() -> None:
    """Print every stored shortcut, sorted by name, with a prompt preview."""
    aliases = load_aliases()
    if not aliases:
        print("No shortcuts available.")
        return
    print("Available shortcuts:")
    for alias, prompt in sorted(aliases.items()):
        print(f"  {alias} - {truncate_prompt(prompt, PREVIEW_LENGTH)}")


def execute_shortcut(shortcut: str, args: list[str]) -> int:
    """Run the agent with the prompt stored under ``shortcut``.

    ``args`` are the command-line arguments that follow the shortcut name;
    anything after a ``--`` among them is passed on to the agent.
    Returns the agent's exit status.  Raises ``LookupError`` for an unknown
    shortcut, ``ValueError`` for extra arguments without ``--`` and
    ``RuntimeError`` when the agent cannot be started.
    """
    aliases = load_aliases()
    if shortcut not in aliases:
        raise LookupError(f"Shortcut '{shortcut}' not found")
    prompt = aliases[shortcut]

    agent_command, default_args = parse_agent_command(get_agent())

    per_call_args: list[str] = []
    if args:
        if "--" not in args:
            raise ValueError(
                f"Invalid usage. Use 'qwk {shortcut} -- <agent-args>' "
                "to pass arguments to the agent"
            )
        per_call_args = args[args.index("--") + 1:]

    try:
        completed = subprocess.run(
            [agent_command, *default_args, *per_call_args, prompt], check=False
        )
    except OSError as error:
        raise RuntimeError(
            f"Error executing agent '{agent_command}': {error}"
        ) from error
    # A process killed by a signal has no exit code of its own.
    return completed.returncode if completed.returncode >= 0 else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the ``--command`` style invocations."""
    parser = argparse.ArgumentParser(
        prog="qwk", description="A CLI tool for creating aliases for AI agents"
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--set",
        nargs="+",
        metavar="ARG",
        help="Set an alias for a prompt: ALIAS [PROMPT]. "
        "If no prompt is provided, it will be read from stdin.",
    )
    commands.add_argument(
        "--agent",
        metavar="COMMAND",
        help="Set the agent command to use (can include default arguments in quotes). "
        "Defaults to 'claude'.",
    )
    commands.add_argument(
        "--list", action="store_true", help="List all available shortcuts"
    )
    commands.add_argument(
        "--remove", metavar="ALIAS", help="Remove a specific shortcut"
    )
    commands.add_argument(
        "--reset",
        action="store_true",
        help="Reset all shortcuts (creates backup)",
    )
    commands.add_argument(
        "--complete",
        nargs="?",
        const="",
        default=None,
        metavar="PARTIAL",
        help=argparse.SUPPRESS,
    )
    commands.add_argument(
        "--setup-completion",
        action="store_true",
        help="Set up shell autocompletion",
    )
    parser.add_argument("shortcut", nargs="?", help="Run a stored shortcut")
    return parser


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _set_alias(parser: argparse.ArgumentParser, values: list[str]) -> int:
    if len(values) > 2:
        parser.error("--set takes an alias and an optional prompt")
    alias = values[0]
    if len(values) == 2:
        prompt = values[1]
    else:
        try:
            prompt = read_prompt_from_stdin()
        except OSError as error:
            return _error(f"Error reading prompt: {error}")

    aliases = load_aliases()
    aliases[alias] = prompt
    try:
        save_aliases(aliases)
    except OSError as error:
        return _error(f"Error saving alias: {error}")
    print(f"Alias '{alias}' set successfully")
    return 0


def _remove_alias(alias: str) -> int:
    aliases = load_aliases()
    if aliases.pop(alias, None) is None:
        print(f"Shortcut '{alias}' does not exist")
        return 0
    try:
        save_aliases(aliases)
    except OSError as error:
        return _error(f"Error saving aliases after removal: {error}")
    print(f"Shortcut '{alias}' removed successfully")
    return 0


def _reset() -> int:
    if not confirm_reset():
        print("Reset cancelled.")
        return 0
    try:
        backup_path = create_aliases_backup()
    except OSError as error:
        return _error(f"Error creating backup: {error}")
    if backup_path is None:
        print("No existing aliases file to backup.")
    else:
        print(f"Backup created: {backup_path}")

    aliases_file = get_aliases_file()
    if aliases_file.exists():
        try:
            aliases_file.unlink()
        except OSError as error:
            return _error(f"Error removing aliases file: {error}")
    print("All shortcuts have been reset.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the ``qwk`` command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or "complete" not in args[0]:
        handle_first_run()

    if args and not args[0].startswith("--"):
        try:
            return execute_shortcut(args[0], args[1:])
        except (LookupError, ValueError, RuntimeError) as error:
            return _error(str(error))

    parser = build_parser()
    options = parser.parse_args(args)

    if options.set is not None:
        return _set_alias(parser, options.set)
    if options.agent is not None:
        try:
            set_agent(options.agent)
        except OSError as error:
            return _error(f"Error setting agent: {error}")
        print(f"Agent set to '{options.agent}'")
        return 0
    if options.list:
        list_aliases()
        return 0
    if options.complete is not None:
        generate_completions(options.complete or None)
        return 0
    if options.setup_completion:
        try:
            setup_completion_for_current_shell()
        except OSError as error:
            return _error(f"Error setting up autocompletion: {error}")
        return 0
    if options.remove is not None:
        return _remove_alias(options.remove)
    if options.reset:
        return _reset()
    if options.shortcut is not None:
        return _error(f"Shortcut '{options.shortcut}' not found")
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())