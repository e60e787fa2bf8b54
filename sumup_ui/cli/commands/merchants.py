from __future__ import annotations

from typing import Any, Optional

import typer

from sumup_app.api import MERCHANT_CODE_ENV, resolve_merchant_code
from sumup_common.api import ContextError
from sumup_ui.cli.commands.run_helpers import run_command
from sumup_ui.presenters.merchant import build_merchant_table
from sumup_ui.wiring.dependencies import UIContext


def create_merchants_app(ctx: UIContext) -> typer.Typer:
    """Build the merchants Typer app, wired to the given context."""
    app = typer.Typer(help="Commands related to merchant accounts.", no_args_is_help=True)

    @app.command("get")
    def merchants_get(
        merchant_code: Optional[str] = typer.Option(
            None,
            "--merchant-code",
            envvar=MERCHANT_CODE_ENV,
            help="Merchant code to retrieve information for. Falls back to context.",
        ),
    ) -> None:
        """Get merchant information."""
        try:
            code = resolve_merchant_code(merchant_code, ctx.context_store)
        except ContextError as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(1)

        async def _get() -> dict[str, Any]:
            async with ctx.create_client() as client:
                return await client.get_merchant(code)

        if not ctx.json_output:
            ctx.ui.present.info(f"Getting merchant information for: {code}")
        merchant = run_command(ctx, _get())
        if ctx.json_output:
            ctx.ui.json.show(merchant)
            return
        ctx.ui.tables.show(build_merchant_table(merchant))

    return app
