from __future__ import annotations

from typing import Optional

import typer

from sumup_app.api import ListMembershipsParams, MembershipList, MembershipStatus
from sumup_ui.cli.commands.run_helpers import run_command
from sumup_ui.presenters.memberships import build_memberships_table
from sumup_ui.wiring.dependencies import UIContext


def _parse_status(value: Optional[str]) -> Optional[MembershipStatus]:
    if not value:
        return None
    try:
        return MembershipStatus.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--status")


def create_memberships_app(ctx: UIContext) -> typer.Typer:
    """Build the memberships Typer app, wired to the given context."""
    app = typer.Typer(help="Commands related to memberships.", no_args_is_help=True)

    @app.command("list")
    def memberships_list(
        offset: Optional[int] = typer.Option(
            None, "--offset", help="Offset of the first membership to return."
        ),
        limit: Optional[int] = typer.Option(
            None, "--limit", help="Maximum number of memberships to return."
        ),
        kind: Optional[str] = typer.Option(
            None, "--kind", help="Filter memberships by resource kind."
        ),
        status: Optional[str] = typer.Option(
            None,
            "--status",
            help="Filter memberships by status (accepted, pending, expired, disabled, unknown).",
        ),
        resource_type: Optional[str] = typer.Option(
            None, "--resource-type", help="Filter memberships by the resource type."
        ),
        resource_name: Optional[str] = typer.Option(
            None, "--resource-name", help="Filter memberships by resource name."
        ),
        sandbox: bool = typer.Option(
            False, "--sandbox", help="Filter memberships to sandbox resources only."
        ),
    ) -> None:
        """List memberships for the authenticated user."""
        params = ListMembershipsParams(
            offset=offset,
            limit=limit,
            kind=kind or None,
            status=_parse_status(status),
            resource_type=resource_type or None,
            resource_name=resource_name or None,
            sandbox=True if sandbox else None,
        )

        async def _list() -> MembershipList:
            async with ctx.create_client() as client:
                return await client.list_memberships(params)

        if ctx.json_output:
            result = run_command(ctx, _list())
            ctx.ui.json.show(result.model_dump(mode="json"))
            return
        with ctx.ui.progress.status("Fetching memberships..."):
            result = run_command(ctx, _list())
        ctx.ui.tables.show(build_memberships_table(result))

    return app
