# SPDX-License-Identifier: Apache-2.0
"""Inventory tools exposed to the calling agent."""

from typing import List

from ..clients.inventory_api import InventoryApiClient
from ..services.location_resolver import LocationResolver
from .base import SideEffect, Tool, ToolResult
from .items import (
    CreateInventoryItemTool,
    DeleteInventoryItemTool,
    GetInventoryItemsTool,
    StoreInventoryItemTool,
    UpdateInventoryItemTool,
)
from .locations import (
    CreateStockLocationTool,
    FindOrCreateStockLocationTool,
    GetStockLocationsTool,
)


def build_tools(client: InventoryApiClient) -> List[Tool]:
    """The fixed catalog, in the order it is listed to agents."""
    resolver = LocationResolver(client)
    return [
        GetStockLocationsTool(client),
        CreateStockLocationTool(client),
        FindOrCreateStockLocationTool(resolver),
        GetInventoryItemsTool(client),
        CreateInventoryItemTool(client),
        StoreInventoryItemTool(client, resolver),
        UpdateInventoryItemTool(client),
        DeleteInventoryItemTool(client),
    ]


__all__ = ["SideEffect", "Tool", "ToolResult", "build_tools"]
