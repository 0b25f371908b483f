"""Tests for configuration loading."""

import pytest

from code_evolve.config import Config


_ENV_KEYS = ("DEFAULT_MODEL", "ASSISTANT_NAME", "FUZZY_MATCH", "SHOW_DIFF",
             "LOG_DIR", "MAX_FILE_SIZE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    cfg = Config()

    assert cfg.DEFAULT_MODEL == "gemini-2.5-flash-preview-04-17"
    assert cfg.ASSISTANT_NAME == "AlphaEvolve"
    assert cfg.FUZZY_MATCH is True
    assert cfg.SHOW_DIFF is True
    assert cfg.LOG_DIR == ".code_evolve/logs"
    assert cfg.MAX_FILE_SIZE == 32_000


def test_yaml_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("fuzzy_match: false\nmax_file_size: 1000\nassistant_name: Bob\n")

    cfg = Config.load(str(path))

    assert cfg.FUZZY_MATCH is False
    assert cfg.MAX_FILE_SIZE == 1000
    assert cfg.ASSISTANT_NAME == "Bob"


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yaml"
    path.write_text("fuzzy_match: true\nmax_file_size: 1000\n")
    monkeypatch.setenv("FUZZY_MATCH", "false")
    monkeypatch.setenv("MAX_FILE_SIZE", "5")

    cfg = Config.load(str(path))

    assert cfg.FUZZY_MATCH is False
    assert cfg.MAX_FILE_SIZE == 5


def test_config_in_cwd_is_found(tmp_path, monkeypatch):
    (tmp_path / ".code_evolve.yaml").write_text("show_diff: false\n")
    monkeypatch.chdir(tmp_path)

    assert Config.load().SHOW_DIFF is False


def test_malformed_yaml_uses_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("fuzzy_match: [unclosed\n")

    assert Config.load(str(path)).FUZZY_MATCH is True


def test_missing_explicit_path_uses_defaults(tmp_path):
    assert Config.load(str(tmp_path / "nope.yaml")).ASSISTANT_NAME == "AlphaEvolve"
