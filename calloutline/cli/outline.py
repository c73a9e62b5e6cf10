"""Outline Typer app factory."""

import typer

from calloutline.api.outline.cmd_extract import cmd_extract
from calloutline.api.outline.cmd_show import cmd_show
from calloutline.cli._handle_stage_result import handle_stage_result


def outline() -> typer.Typer:
    """Create and configure the outline Typer app."""
    app = typer.Typer(
        name="outline",
        help="Callout outline operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="extract")
    def extract_cmd(
        path: str = typer.Argument(..., help="Document to scan for chat callouts"),
    ) -> None:
        """Extract callout headings from a document."""
        handle_stage_result(cmd_extract)(path)

    @app.command(name="show")
    def show_cmd(
        path: str = typer.Argument(..., help="Document to outline"),
    ) -> None:
        """Show native and callout headings merged in document order."""
        handle_stage_result(cmd_show)(path)

    return app
