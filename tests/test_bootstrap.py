# File: tests/test_bootstrap.py

"""
Tests for env-file loading and profile selection.

Tests pass their own ``environ`` dict unless they are checking the
default of writing to the real process environment.
"""

import os

import pytest

from beaver_core.core.bootstrap import (
    DEFAULT_PROFILE,
    PROFILE_KEY,
    apply_properties,
    bootstrap,
    load_env_file,
    resolve_active_profile,
)


def test_missing_env_file_is_not_an_error(tmp_path):
    environ = {}
    profile = bootstrap(tmp_path, environ)
    assert profile == "local"
    assert environ == {PROFILE_KEY: "local"}


def test_unset_profile_defaults_to_local():
    assert DEFAULT_PROFILE == "local"
    assert resolve_active_profile({}) == "local"
    assert resolve_active_profile({PROFILE_KEY: "   "}) == "local"
    assert resolve_active_profile({PROFILE_KEY: " test "}) == "test"


def test_env_file_values_land_in_environ(tmp_path):
    (tmp_path / ".env").write_text("GREETING=hello\nDATABASE_URL=sqlite://\n")
    environ = {}

    bootstrap(tmp_path, environ)

    assert environ["GREETING"] == "hello"
    assert environ["DATABASE_URL"] == "sqlite://"


def test_env_file_selects_profile(tmp_path):
    (tmp_path / ".env").write_text("APP_PROFILE=production\n")
    environ = {}

    assert bootstrap(tmp_path, environ) == "production"
    assert environ[PROFILE_KEY] == "production"


def test_existing_environment_wins_over_env_file(tmp_path):
    (tmp_path / ".env").write_text("PORT=9000\nHOST=0.0.0.0\n")
    environ = {"PORT": "8000", "UNRELATED": "kept"}

    bootstrap(tmp_path, environ)

    assert environ["PORT"] == "8000"
    assert environ["HOST"] == "0.0.0.0"
    assert environ["UNRELATED"] == "kept"


def test_exported_profile_is_not_replaced_by_env_file(tmp_path):
    (tmp_path / ".env").write_text("APP_PROFILE=local\nDATABASE_URL=sqlite:///./local.db\n")
    (tmp_path / ".env.production").write_text("DATABASE_URL=sqlite:///./overlay.db\nWORKERS=4\n")
    environ = {"APP_PROFILE": "production", "DATABASE_URL": "postgresql://prod/db"}

    assert bootstrap(tmp_path, environ) == "production"
    assert environ["DATABASE_URL"] == "postgresql://prod/db"
    assert environ["WORKERS"] == "4"


def test_duplicate_keys_last_one_wins(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("COLOR=red\nCOLOR=blue\n")
    assert load_env_file(env_file) == {"COLOR": "blue"}


def test_values_are_not_interpolated(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("BASE=/srv\nDATA=${BASE}/data\n")
    assert load_env_file(env_file)["DATA"] == "${BASE}/data"


def test_bare_keys_and_comments_are_skipped(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nNO_VALUE\nGOOD=1\n")
    assert load_env_file(env_file) == {"GOOD": "1"}


def test_malformed_lines_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GOOD=1\nBROKEN='unterminated\nALSO_GOOD=2\n")

    values = load_env_file(env_file)

    assert values["GOOD"] == "1"
    assert values["ALSO_GOOD"] == "2"
    assert "BROKEN" not in values


def test_undecodable_file_is_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_bytes(b"KEY=\xff\xfe\xfa\n")
    assert load_env_file(env_file) == {}


def test_profile_overlay_is_applied_after_base(tmp_path):
    (tmp_path / ".env").write_text("APP_PROFILE=test\nDATABASE_URL=sqlite:///base.db\nNAME=base\n")
    (tmp_path / ".env.test").write_text("DATABASE_URL=sqlite://\n")
    environ = {}

    bootstrap(tmp_path, environ)

    assert environ["DATABASE_URL"] == "sqlite://"
    assert environ["NAME"] == "base"


def test_overlay_cannot_switch_profile(tmp_path):
    (tmp_path / ".env.local").write_text("APP_PROFILE=production\n")
    environ = {}

    assert bootstrap(tmp_path, environ) == "local"
    assert environ[PROFILE_KEY] == "local"


def test_apply_properties_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("BEAVER_CORE_TEST_KEY", "old")

    apply_properties({"BEAVER_CORE_TEST_KEY": "new"})

    assert os.environ["BEAVER_CORE_TEST_KEY"] == "new"


def test_profile_with_path_separator_is_rejected(tmp_path):
    (tmp_path / ".env").write_text("APP_PROFILE=../secrets\n")

    with pytest.raises(ValueError):
        bootstrap(tmp_path, {})
