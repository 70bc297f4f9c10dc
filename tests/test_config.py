import json
import re
from pathlib import Path

import pytest

from qwak.config import (
    create_aliases_backup,
    ensure_config_dir,
    get_agent,
    get_agent_file,
    get_aliases_file,
    get_config_dir,
    load_aliases,
    save_aliases,
    set_agent,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_paths_under_home(home):
    assert get_config_dir() == home / ".config" / "qwk"
    assert get_aliases_file() == home / ".config" / "qwk" / "aliases.json"
    assert get_agent_file() == home / ".config" / "qwk" / "agent"


def test_missing_home_raises(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(RuntimeError, match="HOME"):
        get_config_dir()


def test_ensure_config_dir_creates_directory(home):
    path = ensure_config_dir()
    assert path == home / ".config" / "qwk"
    assert path.is_dir()


def test_alias_storage_and_retrieval(home):
    assert load_aliases() == {}
    save_aliases({"test1": "prompt1", "test2": "prompt2"})
    loaded = load_aliases()
    assert len(loaded) == 2
    assert loaded["test1"] == "prompt1"
    assert loaded["test2"] == "prompt2"


def test_saved_file_is_pretty_json(home):
    save_aliases({"a": "héllo"})
    text = get_aliases_file().read_text(encoding="utf-8")
    assert text == '{\n  "a": "héllo"\n}'
    assert json.loads(text) == {"a": "héllo"}


@pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"a": 1}', ""])
def test_invalid_aliases_file_gives_empty(home, content):
    ensure_config_dir()
    get_aliases_file().write_text(content, encoding="utf-8")
    assert load_aliases() == {}


def test_agent_default(home):
    assert get_agent() == "claude"


def test_agent_round_trip_is_trimmed(home):
    set_agent("codex --model fast\n")
    assert get_agent_file().read_text(encoding="utf-8") == "codex --model fast\n"
    assert get_agent() == "codex --model fast"


def test_backup_without_aliases_file(home):
    assert create_aliases_backup() is None


def test_backup_copies_aliases(home):
    save_aliases({"x": "do x"})
    backup = create_aliases_backup()
    backup_path = Path(backup)
    assert backup_path.parent == get_config_dir()
    assert re.fullmatch(r"aliases_backup_\d{8}_\d{6}\.json", backup_path.name)
    assert json.loads(backup_path.read_text(encoding="utf-8")) == {"x": "do x"}
    assert get_aliases_file().exists()