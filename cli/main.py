"""scrapesync CLI: look at a scrape result file and save it to the backend.

Usage:
    python cli/main.py --help

Commands:
    show      list every scraped page with its title and indexability
    outline   print the heading outline of one page
    submit    normalize the whole file and persist it in one request
    project   choose the default project for `submit`
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from scrapesync.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Any, Optional

import typer

from cli.commands.project import project_app
from cli.context import load_context
from cli.rendering import render_outline, render_summary
from scrapesync.config import settings
from scrapesync.normalize import NormalizationError, normalize_article
from scrapesync.submission import TransportFailure, submit_results

app = typer.Typer(
    name="scrapesync",
    help="Review scrape results and save them to the backend.",
    no_args_is_help=True,
)
app.add_typer(project_app, name="project")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_results(path: Path) -> list[Any]:
    """Read a results file: a JSON array, or an object with an ``articles`` array."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"❌ Could not read {path}: {exc}")
        raise typer.Exit(code=1)

    if isinstance(data, dict):
        data = data.get("articles")
    if not isinstance(data, list):
        typer.echo(f"❌ {path} does not contain a list of articles.")
        raise typer.Exit(code=1)
    return data


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("show")
def show(
    path: Path = typer.Argument(..., help="Scrape result JSON file."),
) -> None:
    """List every page in the result file."""
    results = _load_results(path)
    if not results:
        typer.echo("No results. Run a scrape first and pass its output file.")
        return

    typer.echo(f"{len(results)} result(s)")
    for i, raw in enumerate(results):
        try:
            article = normalize_article(raw, locator=f"articles[{i}]")
        except NormalizationError as exc:
            typer.echo(f"[{i}] ❌ {exc}")
            continue
        typer.echo("")
        typer.echo(render_summary(i, article))


@app.command("outline")
def outline(
    path: Path = typer.Argument(..., help="Scrape result JSON file."),
    index: int = typer.Option(0, "--index", "-i", help="Position of the page in the file."),
) -> None:
    """Print the heading outline of one page."""
    results = _load_results(path)
    if not 0 <= index < len(results):
        typer.echo(f"❌ No result at index {index} (file has {len(results)}).")
        raise typer.Exit(code=1)

    try:
        article = normalize_article(results[index], locator=f"articles[{index}]")
    except NormalizationError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)

    tree = render_outline(article.headings)
    typer.echo(tree or "(no headings)")


@app.command("submit")
def submit(
    path: Path = typer.Argument(..., help="Scrape result JSON file."),
    project_id: Optional[int] = typer.Option(
        None, "--project-id", "-p", help="Target project (defaults to the active project)."
    ),
    token: Optional[str] = typer.Option(
        None, "--token", help="Bearer token (defaults to SCRAPESYNC_API_TOKEN)."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Override the submit endpoint."),
) -> None:
    """Normalize every page in PATH and save them in a single request."""
    if project_id is None:
        project_id = load_context().active_project_id
    if project_id is None:
        project_id = settings.default_project_id
    if project_id is None:
        typer.echo("❌ No project selected. Pass --project-id or run 'project use <id>'.")
        raise typer.Exit(code=1)

    results = _load_results(path)
    outcome = submit_results(
        results, project_id, token if token is not None else settings.api_token, url=url
    )

    if outcome.ok:
        typer.echo(f"✅ Saved {len(results)} article(s) to project {project_id}.")
        return
    if isinstance(outcome, TransportFailure) and outcome.status_code is not None:
        typer.echo(f"❌ Save failed (HTTP {outcome.status_code}): {outcome.message}")
    else:
        typer.echo(f"❌ {outcome.message}")
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
