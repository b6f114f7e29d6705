"""Active project commands."""

import typer

from cli.context import load_context, save_context

project_app = typer.Typer(help="Choose the project that results are saved to.")


@project_app.command("use")
def project_use(
    project_id: int = typer.Argument(..., help="Numeric project id on the backend.")
) -> None:
    """Make PROJECT_ID the default target for `submit`."""
    ctx = load_context()
    ctx.active_project_id = project_id
    save_context(ctx)
    typer.echo(f"📂 Active project: {project_id}")


@project_app.command("status")
def project_status() -> None:
    """Show the active project."""
    ctx = load_context()
    if ctx.active_project_id is None:
        typer.echo("No active project. Run 'project use <id>' first.")
        return
    typer.echo(f"Active project: {ctx.active_project_id}")


@project_app.command("clear")
def project_clear() -> None:
    """Forget the active project."""
    ctx = load_context()
    ctx.active_project_id = None
    save_context(ctx)
    typer.echo("Active project cleared.")
