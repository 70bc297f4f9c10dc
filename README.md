# qwak

Quick agentic aliases. `qwk` stores prompts under short names and runs them
through an AI agent command (by default `claude`).

## Installation

```
pip install .
```

This installs the `qwk` command. It needs Python 3.10 or later and nothing
outside the standard library.

## Usage

Store a prompt under an alias:

```
qwk --set review "Review the staged changes and point out bugs."
```

If the prompt is left out, all of standard input is read and stripped of
surrounding whitespace:

```
cat prompt.txt | qwk --set review
```

Run a stored shortcut. The agent is started with its default arguments,
then any per-call arguments, then the prompt as the last argument; `qwk`
exits with the agent's exit status:

```
qwk review
```

Pass extra arguments to the agent for a single call after `--`:

```
qwk review -- --model sonnet
```

Any other arguments after the shortcut name, without `--`, are rejected with
an error. An unknown shortcut is also an error.

Choose the agent command. It is split with shell-style quoting, and default
arguments given here are passed on every call:

```
qwk --agent "claude --verbose"
```

Manage shortcuts:

```
qwk --list              # list aliases, sorted, with a 60-character prompt preview
qwk --remove review     # delete one alias
qwk --reset             # delete all aliases after confirmation, writing a backup first
```

`qwk` with no arguments prints the help.

## Shell completion

On its first run `qwk` looks at `$SHELL` and, for bash, zsh or fish, appends
a completion script to `~/.bashrc` (or `~/.bash_profile` if there is no
`~/.bashrc`), `~/.zshrc` or `~/.config/fish/config.fish`. It does this only
once, and not if a script is already there. To do it by hand:

```
qwk --setup-completion
```

Completions offer the stored alias names and the `--` options.

## Files

Everything lives in `~/.config/qwk/`:

- `aliases.json`: the stored aliases, as a JSON object of name to prompt
- `agent`: the agent command
- `aliases_backup_YYYYMMDD_HHMMSS.json`: backups written by `--reset` (UTC time)
- `.first_run_complete`: marks that first-run setup has happened

## Library

The same functions are available from Python: `qwak.config` reads and writes
the files above (`load_aliases`, `save_aliases`, `get_agent`, `set_agent`,
`create_aliases_backup`), `qwak.completion` handles shell completion, and
`qwak.cli.main(argv)` runs the command and returns its exit status.