from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

import typer

from sumup_common.api import SumupError
from sumup_ui.flows.errors import UIFlowError
from sumup_ui.wiring.dependencies import UIContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_command(ctx: UIContext, work: Awaitable[T]) -> T:
    """Run ``work`` to completion, reporting known failures and exiting non-zero."""
    try:
        return asyncio.run(work)
    except UIFlowError as exc:
        ctx.ui.present.error(str(exc))
        raise typer.Exit(exc.exit_code)
    except SumupError as exc:
        logger.debug("Command failed: %s", exc.to_dict())
        ctx.ui.present.error(str(exc))
        raise typer.Exit(1)
