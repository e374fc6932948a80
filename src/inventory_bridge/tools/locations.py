# SPDX-License-Identifier: Apache-2.0
"""
Stock Location Tools

Listing, explicit creation and find-or-create of stock locations.
"""

from typing import Any, Dict

from ..clients.inventory_api import InventoryApiClient
from ..exceptions import BackendError
from ..models import StockLocationCreate
from ..services.location_resolver import LocationResolver
from .base import SideEffect, Tool, ToolResult, parse_args, render_json


class GetStockLocationsTool(Tool):
    """List stock locations, optionally filtered by a search term"""

    name = "get_stock_locations"
    description = "Get all available stock locations, optionally filtered by search term"
    side_effect = SideEffect.READ
    properties = {
        "search": {
            "type": "string",
            "description": "Optional search term to filter locations",
        }
    }

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        search = args.get("search") or None
        try:
            locations = await self.client.list_stock_locations(search=search)
        except BackendError as e:
            raise e.with_context("Failed to get stock locations") from e

        matching = f' matching "{search}"' if search else ""
        return ToolResult.ok(
            f"Found {len(locations)} stock locations{matching}:\n{render_json(locations)}",
            data=locations,
        )


class CreateStockLocationTool(Tool):
    """Create a stock location with an explicit short name"""

    name = "create_stock_location"
    description = "Create a new stock location"
    side_effect = SideEffect.WRITE
    properties = {
        "name": {"type": "string", "description": "Full name of the stock location"},
        "short_name": {"type": "string", "description": "Short name/code for the location"},
        "description": {"type": "string", "description": "Optional description of the location"},
    }
    required = ["name", "short_name"]

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        payload = parse_args(StockLocationCreate, args).model_dump(exclude_none=True)
        try:
            location = await self.client.create_stock_location(payload)
        except BackendError as e:
            raise e.with_context("Failed to create stock location") from e

        return ToolResult.ok(
            f"Successfully created stock location: {render_json(location)}", data=location
        )


class FindOrCreateStockLocationTool(Tool):
    """Resolve a free-text description to a stock location, creating it when missing"""

    name = "find_or_create_stock_location"
    description = (
        "Find the stock location that best matches a free-text description, "
        "or create it (with a derived short code) if none exists"
    )
    side_effect = SideEffect.WRITE
    properties = {
        "location_description": {
            "type": "string",
            "description": 'Free-text location, e.g. "shelf A in the storage room"',
        }
    }
    required = ["location_description"]

    def __init__(self, resolver: LocationResolver):
        self.resolver = resolver

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        description = str(args["location_description"])
        location = await self.resolver.resolve(description)
        return ToolResult.ok(
            f'Resolved stock location "{description}": {render_json(location)}',
            data=location.model_dump(),
        )
