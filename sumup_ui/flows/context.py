"""Interactive selection and persistence of the active merchant context."""

from __future__ import annotations

import logging
from typing import Optional

from sumup_app.api import ContextStore, ItemSource, MembershipRecord
from sumup_common.api import (
    ApiError,
    ConfigurationError,
    ContextError,
    MembershipFetchError,
)
from sumup_ui.tui.system.protocols import UI

logger = logging.getLogger(__name__)


async def select_merchant_context(
    ui: UI,
    source: ItemSource,
    store: ContextStore,
) -> Optional[MembershipRecord]:
    """Let the user pick a merchant and persist its code as the active context.

    Returns the chosen merchant, or ``None`` when nothing usable was selected
    (no memberships, the user quit, or an organization came back).
    """
    ui.present.info("Fetching your memberships...")
    try:
        root_items = list(await source.fetch())
    except ApiError as exc:
        raise MembershipFetchError(f"list memberships: {exc}", cause=exc) from exc

    if not root_items:
        ui.present.warning("No memberships found.")
        return None

    outcome = await ui.picker.pick(root_items, source)
    if outcome.error is not None:
        raise MembershipFetchError(
            f"list memberships: {outcome.error}", cause=outcome.error
        ) from outcome.error

    selected = outcome.selected
    if selected is None:
        ui.present.warning("No merchant selected.")
        return None
    if selected.is_organization:
        ui.present.warning("Please select a merchant, not an organization.")
        return None

    merchant_code = selected.merchant_code
    if not merchant_code:
        raise ContextError(
            "merchant code not found in membership attributes",
            context={"resource_id": selected.resource_id},
        )

    try:
        store.set_current_merchant_code(merchant_code)
    except ConfigurationError as exc:
        raise ContextError(f"save merchant context: {exc}", cause=exc) from exc

    logger.debug("Persisted merchant context %s", merchant_code)
    ui.present.success(
        f"Merchant context set to: {selected.resource_name} ({merchant_code})"
    )
    return selected
