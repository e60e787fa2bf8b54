"""Async HTTP client for the subset of the SumUp API used by the CLI."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from sumup_app.models.memberships import ListMembershipsParams, MembershipList
from sumup_common.errors import ApiError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.sumup.com"
DEFAULT_TIMEOUT = httpx.Timeout(connect=5.0, read=30.0, write=10.0, pool=5.0)


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "detail", "title", "error_message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return response.reason_phrase


class SumupClient:
    """Thin async wrapper around ``httpx.AsyncClient``.

    One instance may serve several concurrent requests; it holds no per-request
    state. Use it as an async context manager or call :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: httpx.Timeout = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "SumupClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_memberships(self, params: ListMembershipsParams) -> MembershipList:
        """List memberships of the authenticated user."""
        payload = await self._get_json("/v0.1/memberships", params=params.to_query())
        try:
            return MembershipList.model_validate(payload)
        except ValidationError as exc:
            raise ApiError(
                "Unexpected memberships payload",
                context={"path": "/v0.1/memberships"},
                cause=exc,
            ) from exc

    async def get_merchant(self, merchant_code: str) -> dict[str, Any]:
        """Fetch the merchant profile for ``merchant_code``."""
        payload = await self._get_json(f"/v1/merchants/{quote(merchant_code, safe='')}")
        if not isinstance(payload, dict):
            raise ApiError(
                "Unexpected merchant payload",
                context={"merchant_code": merchant_code},
            )
        return payload

    async def _get_json(
        self, path: str, *, params: Optional[dict[str, str]] = None
    ) -> Any:
        logger.debug("GET %s params=%s", path, params or {})
        try:
            response = await self._http.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise ApiError(
                f"Request to {path} timed out",
                context={"path": path},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ApiError(
                f"Could not reach the SumUp API at {self._base_url}: {exc}",
                context={"path": path},
                cause=exc,
            ) from exc

        if response.is_error:
            detail = _error_detail(response)
            raise ApiError(
                f"{path} failed with status {response.status_code}: {detail}",
                context={"path": path, "status_code": response.status_code},
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"{path} returned a non-JSON body",
                context={"path": path, "status_code": response.status_code},
                cause=exc,
            ) from exc
