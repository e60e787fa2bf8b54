"""
Command-line interface for the SumUp API.

Exposes the merchant context picker plus the membership and merchant lookups
that rely on it.
"""

from __future__ import annotations

from typing import Optional

import typer

# Command modules
from sumup_ui.cli.commands.context import create_context_app
from sumup_ui.cli.commands.memberships import create_memberships_app
from sumup_ui.cli.commands.merchants import create_merchants_app

from sumup_app.api import DEFAULT_BASE_URL
from sumup_ui.wiring.dependencies import configure_logging, UIContext

# Initialize global context (lazy)
ctx_store = UIContext()

context_app = create_context_app(ctx_store)
memberships_app = create_memberships_app(ctx_store)
merchants_app = create_merchants_app(ctx_store)

app = typer.Typer(help="Command-line client for the SumUp API.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        envvar="SUMUP_API_KEY",
        help="API key used to authenticate requests.",
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL,
        "--base-url",
        envvar="SUMUP_BASE_URL",
        help="Base URL of the SumUp API.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print raw JSON instead of tables.",
    ),
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Force headless output (useful in CI).",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Global entry point handling credentials and output modes."""
    configure_logging(debug=debug, force=True)
    ctx_store.api_key = api_key
    ctx_store.base_url = base_url
    ctx_store.json_output = json_output
    ctx_store.headless = headless

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.add_typer(context_app, name="context")
app.add_typer(memberships_app, name="memberships")
app.add_typer(merchants_app, name="merchants")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
