from __future__ import annotations

import typer

from sumup_app.api import MembershipSource
from sumup_common.api import ConfigurationError
from sumup_ui.cli.commands.run_helpers import run_command
from sumup_ui.flows.context import select_merchant_context
from sumup_ui.wiring.dependencies import UIContext


def create_context_app(ctx: UIContext) -> typer.Typer:
    """Build the context Typer app, wired to the given context."""
    app = typer.Typer(help="Manage merchant context for commands.", no_args_is_help=True)

    @app.command("set")
    def context_set() -> None:
        """Set the current merchant context."""

        async def _select() -> None:
            async with ctx.create_client() as client:
                await select_merchant_context(
                    ctx.ui, MembershipSource(client), ctx.context_store
                )

        run_command(ctx, _select())

    @app.command("get")
    def context_get() -> None:
        """Get the current merchant context."""
        try:
            merchant_code = ctx.context_store.get_current_merchant_code()
        except ConfigurationError as exc:
            ctx.ui.present.error(f"get merchant context: {exc}")
            raise typer.Exit(1)

        if ctx.json_output:
            ctx.ui.json.show({"merchant_code": merchant_code or None})
            return
        if not merchant_code:
            ctx.ui.present.info("No merchant context set.")
            ctx.ui.present.info("Use 'sumup context set' to set a merchant context.")
            return
        ctx.ui.present.info(f"Current merchant context: {merchant_code}")

    @app.command("unset")
    def context_unset() -> None:
        """Unset the current merchant context."""
        try:
            ctx.context_store.set_current_merchant_code("")
        except ConfigurationError as exc:
            ctx.ui.present.error(f"unset merchant context: {exc}")
            raise typer.Exit(1)
        ctx.ui.present.success("Merchant context unset.")

    return app
