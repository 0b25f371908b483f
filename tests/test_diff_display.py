"""Tests for diff preview and approval."""

import builtins

from code_evolve.diff_display import (
    compute_diff, format_colored_diff, prompt_apply_approval, show_diff,
)


OLD = "def f():\n    return 1\n"
NEW = "def f():\n    return 2\n"


def test_compute_diff_unchanged_is_none():
    assert compute_diff("f.py", OLD, OLD) is None


def test_compute_diff_shows_changed_lines():
    diff = compute_diff("f.py", OLD, NEW)

    assert "--- a/f.py" in diff
    assert "+++ b/f.py" in diff
    assert "-    return 1" in diff
    assert "+    return 2" in diff


def test_colored_diff():
    colored = format_colored_diff(compute_diff("f.py", OLD, NEW))

    assert "\033[32m+    return 2\033[0m" in colored
    assert "\033[31m-    return 1\033[0m" in colored
    assert "\033[1m--- a/f.py" in colored


def test_show_diff_prints(capsys):
    diff = show_diff("f.py", OLD, NEW)

    assert "+    return 2" in diff
    assert "return 2" in capsys.readouterr().out


def test_show_diff_log_only_prints_nothing(capsys):
    assert show_diff("f.py", OLD, NEW, log_only=True) is not None
    assert capsys.readouterr().out == ""


def test_show_diff_unchanged(capsys):
    assert show_diff("f.py", OLD, OLD) is None
    assert "No changes for f.py" in capsys.readouterr().out


class TestApproval:
    def test_auto_approves(self):
        assert prompt_apply_approval("f.py", auto=True) is True

    def test_yes(self, monkeypatch):
        monkeypatch.setattr(builtins, "input", lambda _: "Y")
        assert prompt_apply_approval("f.py") is True

    def test_default_is_no(self, monkeypatch):
        monkeypatch.setattr(builtins, "input", lambda _: "")
        assert prompt_apply_approval("f.py") is False

    def test_eof_is_no(self, monkeypatch):
        def _eof(_):
            raise EOFError
        monkeypatch.setattr(builtins, "input", _eof)
        assert prompt_apply_approval("f.py") is False
