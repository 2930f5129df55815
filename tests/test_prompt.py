import os
import re
from unittest.mock import patch

from minish.prompt import (
    GREEN,
    RESET,
    Prompt,
    current_directory,
    hostname,
    join_all,
    username,
)

_COLOR = re.compile("\001\033\\[[0-9;]*m\002")


def test_home_prefix_replaced_with_tilde():
    assert current_directory("/home/alice/projects", "/home/alice") == "~/projects"


def test_exact_home_is_tilde():
    assert current_directory("/home/alice", "/home/alice") == "~"


def test_no_home_keeps_path():
    assert current_directory("/srv/data", None) == "/srv/data"


def test_unrelated_home_keeps_path():
    assert current_directory("/srv/data", "/home/alice") == "/srv/data"


def test_plain_prefix_match_is_used():
    assert current_directory("/home/alicex", "/home/alice") == "~x"


def test_empty_home_prefixes_everything():
    assert current_directory("/srv", "") == "~/srv"


def test_default_cwd_is_process_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert current_directory(None, None) == os.getcwd()


def test_default_home_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    here = os.getcwd()
    monkeypatch.setenv("HOME", here)
    assert current_directory() == "~"


def test_username_from_environ():
    assert username({"USER": "alice"}) == "alice"


def test_username_fallback():
    assert username({}) == "user"


def test_hostname_from_environ():
    assert hostname({"HOSTNAME": "box"}) == "box"


def test_hostname_from_system():
    with patch("socket.gethostname", return_value="machine"):
        assert hostname({}) == "machine"


def test_hostname_fallback_on_error():
    with patch("socket.gethostname", side_effect=OSError):
        assert hostname({}) == "host"


def test_join_all_concatenates():
    assert join_all("a", "b", "c") == "abc"


def test_join_all_first_none():
    assert join_all(None, "x") is None


def test_join_all_stops_at_none():
    assert join_all("a", None, "b") == "a"


def test_plain_prompt():
    assert Prompt(cwd="~/x", user="u", host="h").plain() == "u@h:~/x$ "


def test_plain_prompt_missing_cwd():
    assert Prompt(cwd=None, user="u", host="h").plain() is None


def test_colored_prompt_text_without_colors():
    text = Prompt(cwd="~/x", user="u", host="h").colored()
    assert _COLOR.sub("", text) == "u@h ~/x $ "
    assert text.startswith(GREEN + "u")
    assert text.endswith(RESET)


def test_colored_prompt_truncated_without_cwd():
    text = Prompt(cwd=None, user="u", host="h").colored()
    assert _COLOR.sub("", text) == "u@h "


def test_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("USER", "alice")
    monkeypatch.setenv("HOSTNAME", "box")
    monkeypatch.setenv("HOME", os.getcwd())
    prompt = Prompt.from_environment()
    assert prompt == Prompt(cwd="~", user="alice", host="box")