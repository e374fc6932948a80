# SPDX-License-Identifier: Apache-2.0
"""File: src/inventory_bridge/clients/inventory_api.py

Project: inventory-bridge

Description:
    Asynchronous client for the Laravel inventory API. It sends the bearer
    token and JSON headers on every call and is the single place where
    transport and application failures are shaped into BackendError.
    No retries: one failed call fails the invocation that made it.

"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
from httpx import HTTPStatusError, RequestError

from ..exceptions import BackendError
from ..server.config import Settings

logger = logging.getLogger(__name__)

STOCK_LOCATIONS_PATH = "/stock-locations"
INVENTORY_ITEMS_PATH = "/inventory-items"


def unwrap_collection(body: Any) -> List[Any]:
    """Accepts a bare JSON array or an envelope ``{"data": [...]}``."""
    if isinstance(body, dict) and "data" in body:
        body = body["data"]
    if body is None:
        return []
    if not isinstance(body, list):
        raise BackendError(f"Unexpected response shape: expected a list, got {type(body).__name__}")
    return body


def unwrap_entity(body: Any) -> Any:
    """Unwraps ``{"data": {...}}`` resources; anything else is returned as is."""
    if isinstance(body, dict) and isinstance(body.get("data"), dict):
        return body["data"]
    return body


def _error_message(response: httpx.Response) -> tuple[str, Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        details = body.get("errors") if isinstance(body.get("errors"), dict) else {}
        message = body.get("message")
        if isinstance(message, str) and message:
            return message, details
        return f"Request failed with status code {response.status_code}", details
    return f"Request failed with status code {response.status_code}", {}


class InventoryApiClient:
    """Client for the inventory API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.api_url
        headers = {"Accept": "application/json"}
        if settings.api_token:
            headers["Authorization"] = f"Bearer {settings.api_token}"
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(settings.timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "InventoryApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Perform a request and return the parsed JSON body

        Args:
            method: HTTP method
            path: Resource path relative to the API base URL
            params: Optional query parameters; empty values are dropped
            json: Optional request body

        Returns:
            Parsed JSON body, or None when the response has no body

        Raises:
            BackendError: On a non-2xx answer or a transport failure
        """
        query = {k: v for k, v in (params or {}).items() if v is not None and v != ""}
        headers = {"Content-Type": "application/json"} if json is not None else None
        logger.debug(f"{method} {self.base_url}{path} params={query}")

        try:
            response = await self.http_client.request(
                method, path, params=query or None, json=json, headers=headers
            )
            response.raise_for_status()
        except HTTPStatusError as e:
            message, details = _error_message(e.response)
            logger.warning(
                f"Inventory API answered {e.response.status_code} for {method} {path}: {message}"
            )
            raise BackendError(message, status_code=e.response.status_code, details=details) from e
        except RequestError as e:
            message = str(e) or e.__class__.__name__
            logger.warning(f"Network error during {method} {path}: {message}")
            raise BackendError(message) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"Invalid JSON in response to {method} {path}", status_code=response.status_code
            ) from e

    # --- Stock locations ---

    async def list_stock_locations(self, search: Optional[str] = None) -> List[Dict[str, Any]]:
        body = await self.request("GET", STOCK_LOCATIONS_PATH, params={"search": search})
        return unwrap_collection(body)

    async def create_stock_location(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self.request("POST", STOCK_LOCATIONS_PATH, json=payload)
        return unwrap_entity(body)

    # --- Inventory items ---

    async def list_inventory_items(self, search: Optional[str] = None) -> List[Dict[str, Any]]:
        body = await self.request("GET", INVENTORY_ITEMS_PATH, params={"search": search})
        return unwrap_collection(body)

    async def create_inventory_item(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self.request("POST", INVENTORY_ITEMS_PATH, json=payload)
        return unwrap_entity(body)

    async def update_inventory_item(self, item_id: int, changes: Dict[str, Any]) -> Any:
        body = await self.request("PUT", f"{INVENTORY_ITEMS_PATH}/{item_id}", json=changes)
        return unwrap_entity(body)

    async def delete_inventory_item(self, item_id: int) -> Any:
        return await self.request("DELETE", f"{INVENTORY_ITEMS_PATH}/{item_id}")


__all__ = ["InventoryApiClient", "unwrap_collection", "unwrap_entity"]
