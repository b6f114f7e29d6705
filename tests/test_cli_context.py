"""Tests for the CLI context management module."""

import pytest

from cli.context import CliContext, _get_context_path, load_context, save_context


@pytest.fixture
def temp_context_dir(tmp_path, monkeypatch):
    """Override the config directory to use a temporary path."""
    context_dir = tmp_path / ".scrapesync"
    monkeypatch.setattr("cli.context.settings.cli_config_dir", context_dir)
    return context_dir


def test_load_default_context(temp_context_dir):
    """Should return defaults when no file exists."""
    ctx = load_context()
    assert isinstance(ctx, CliContext)
    assert ctx.active_project_id is None


def test_save_creates_directory_and_roundtrips(temp_context_dir):
    save_context(CliContext(active_project_id=42))

    assert _get_context_path() == temp_context_dir / "context.json"
    assert _get_context_path().exists()
    assert load_context().active_project_id == 42


def test_load_corrupt_context(temp_context_dir):
    """Should return defaults if the file is corrupt JSON."""
    temp_context_dir.mkdir()
    (temp_context_dir / "context.json").write_text("{invalid-json", encoding="utf-8")
    assert load_context().active_project_id is None


@pytest.mark.parametrize("payload", ['["a list"]', '{"active_project_id": "uuid-1234"}'])
def test_load_unexpected_shape(temp_context_dir, payload):
    temp_context_dir.mkdir()
    (temp_context_dir / "context.json").write_text(payload, encoding="utf-8")
    assert load_context() == CliContext()
