"""Tests for the scrapesync CLI (show / outline / submit / project)."""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.context import CliContext, save_context
from cli.main import app
from cli.rendering import render_outline, render_summary
from scrapesync.normalize import HeadingNode, normalize_article, normalize_headings

runner = CliRunner()

_URL = "https://api.example.test/articles"

_RESULTS = [
    {
        "id": "1",
        "articleUrl": "https://example.com/guide",
        "metaTitle": "The Guide",
        "metaDescription": "Everything you need.",
        "isIndexable": True,
        "internalLinks": [{"linkUrl": "https://example.com/a"}, {"linkUrl": "https://example.com/b"}],
        "headings": [
            {"tag": "h1", "text": "The Guide", "children": [
                {"tag": "h2", "text": "Start"},
                {"tag": "h2", "text": "Finish", "children": [{"tag": "h3", "text": "Cleanup"}]},
            ]},
        ],
    },
    {"id": "2", "articleUrl": "https://example.com/bare"},
]


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Isolate the CLI context directory and backend settings."""
    context_dir = tmp_path / ".scrapesync"
    monkeypatch.setattr("cli.context.settings.cli_config_dir", context_dir)
    monkeypatch.setattr("scrapesync.config.settings.submit_url", _URL)
    monkeypatch.setattr("scrapesync.config.settings.api_token", "env-token")
    monkeypatch.setattr("scrapesync.config.settings.default_project_id", None)
    return tmp_path


@pytest.fixture
def results_file(cli_env):
    path = cli_env / "results.json"
    path.write_text(json.dumps(_RESULTS), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_render_summary_placeholders():
    text = render_summary(1, normalize_article(_RESULTS[1]))
    assert "(no title)" in text
    assert "(no content)" in text
    assert "NOINDEX" in text
    assert "0 link(s)" in text


def test_render_outline_tree():
    tree = render_outline(normalize_headings(_RESULTS[0]["headings"]))
    assert tree.splitlines() == [
        "H1 The Guide",
        "├── H2 Start",
        "└── H2 Finish",
        "    └── H3 Cleanup",
    ]


def test_render_outline_empty():
    assert render_outline(()) == ""


def test_render_outline_multiple_roots_in_order():
    headings = (
        HeadingNode(tag="h1", text="First", children=(HeadingNode(tag="h2", text="A"),)),
        HeadingNode(tag="h1", text="Second"),
    )
    assert render_outline(headings).splitlines() == [
        "H1 First",
        "└── H2 A",
        "H1 Second",
    ]


def test_render_outline_deeper_than_recursion_limit():
    node = HeadingNode(tag="h6", text="leaf")
    for _ in range(1499):
        node = HeadingNode(tag="h6", text="branch", children=(node,))

    lines = render_outline((node,)).splitlines()
    assert len(lines) == 1500
    assert lines[-1].endswith("└── H6 leaf")


# ---------------------------------------------------------------------------
# show / outline
# ---------------------------------------------------------------------------

def test_show_lists_results(results_file):
    result = runner.invoke(app, ["show", str(results_file)])
    assert result.exit_code == 0
    assert "2 result(s)" in result.stdout
    assert "The Guide" in result.stdout
    assert "INDEX · 2 link(s)" in result.stdout
    assert "(no title)" in result.stdout


def test_show_empty_file(cli_env):
    path = cli_env / "empty.json"
    path.write_text("[]", encoding="utf-8")
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "No results" in result.stdout


def test_show_accepts_wrapped_articles(cli_env):
    path = cli_env / "wrapped.json"
    path.write_text(json.dumps({"articles": _RESULTS}), encoding="utf-8")
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "2 result(s)" in result.stdout


def test_show_bad_json(cli_env):
    path = cli_env / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 1
    assert "❌ Could not read" in result.stdout


def test_outline(results_file):
    result = runner.invoke(app, ["outline", str(results_file), "--index", "0"])
    assert result.exit_code == 0
    assert "└── H3 Cleanup" in result.stdout


def test_outline_no_headings(results_file):
    result = runner.invoke(app, ["outline", str(results_file), "--index", "1"])
    assert result.exit_code == 0
    assert "(no headings)" in result.stdout


def test_outline_bad_index(results_file):
    result = runner.invoke(app, ["outline", str(results_file), "--index", "5"])
    assert result.exit_code == 1


# ---------------------------------------------------------------------------
# submit
# ---------------------------------------------------------------------------

def test_submit_success(results_file):
    with respx.mock:
        route = respx.post(_URL).mock(return_value=httpx.Response(200))
        result = runner.invoke(app, ["submit", str(results_file), "--project-id", "4"])

    assert result.exit_code == 0
    assert "✅ Saved 2 article(s) to project 4." in result.stdout
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer env-token"
    assert json.loads(request.content)["projectId"] == 4


def test_submit_malformed_url(results_file):
    with respx.mock(assert_all_called=False) as mock:
        result = runner.invoke(app, ["submit", str(results_file), "-p", "1", "--url", "http://[::1"])

    assert result.exit_code == 1
    assert "❌ Invalid submit URL" in result.stdout
    assert len(mock.calls) == 0


def test_submit_uses_active_project(results_file):
    save_context(CliContext(active_project_id=9))
    with respx.mock:
        route = respx.post(_URL).mock(return_value=httpx.Response(200))
        result = runner.invoke(app, ["submit", str(results_file), "--token", "cli-token"])

    assert result.exit_code == 0
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer cli-token"
    assert json.loads(request.content)["projectId"] == 9


def test_submit_without_project(results_file):
    result = runner.invoke(app, ["submit", str(results_file)])
    assert result.exit_code == 1
    assert "No project selected" in result.stdout


def test_submit_remote_rejection(results_file):
    with respx.mock:
        respx.post(_URL).mock(return_value=httpx.Response(400, json={"message": "invalid project"}))
        result = runner.invoke(app, ["submit", str(results_file), "-p", "1"])

    assert result.exit_code == 1
    assert "❌ Save failed (HTTP 400): invalid project" in result.stdout


def test_submit_unreachable(results_file):
    with respx.mock:
        respx.post(_URL).mock(side_effect=httpx.ConnectError("refused"))
        result = runner.invoke(app, ["submit", str(results_file), "-p", "1"])

    assert result.exit_code == 1
    assert "❌ Could not reach server" in result.stdout


def test_submit_invalid_file_leaves_it_untouched(cli_env):
    path = cli_env / "broken.json"
    original = json.dumps([{"metaTitle": "no url"}])
    path.write_text(original, encoding="utf-8")

    with respx.mock(assert_all_called=False) as mock:
        result = runner.invoke(app, ["submit", str(path), "-p", "1"])

    assert result.exit_code == 1
    assert "articles[0].articleUrl" in result.stdout
    assert len(mock.calls) == 0
    assert path.read_text(encoding="utf-8") == original


# ---------------------------------------------------------------------------
# project
# ---------------------------------------------------------------------------

def test_project_use_and_status(cli_env):
    result = runner.invoke(app, ["project", "use", "12"])
    assert result.exit_code == 0
    assert "📂 Active project: 12" in result.stdout

    result = runner.invoke(app, ["project", "status"])
    assert "Active project: 12" in result.stdout


def test_project_clear(cli_env):
    save_context(CliContext(active_project_id=3))
    result = runner.invoke(app, ["project", "clear"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["project", "status"])
    assert "No active project" in result.stdout
