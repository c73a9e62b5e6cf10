"""Vault Typer app factory."""

import typer

from calloutline.api.vault.cmd_watch import cmd_watch
from calloutline.cli._handle_stage_result import handle_stage_result


def vault() -> typer.Typer:
    """Create and configure the vault Typer app."""
    app = typer.Typer(
        name="vault",
        help="Vault operations",
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

    @app.command(name="watch")
    def watch_cmd(
        cycles: int | None = typer.Option(None, "--cycles", "-n", min=1, help="Stop after N sync cycles"),
        active: str | None = typer.Option(None, "--active", "-a", help="Vault-relative document to parse at startup"),
    ) -> None:
        """Watch the vault and re-extract callout headings on change."""
        handle_stage_result(cmd_watch)(cycles=cycles, active=active)

    return app
