# SPDX-License-Identifier: Apache-2.0
"""
Inventory Item Tools

CRUD over inventory items plus store_inventory_item, which resolves a
free-text location before creating the item in one call.
"""

from typing import Any, Dict

from ..clients.inventory_api import InventoryApiClient
from ..exceptions import BackendError, ValidationError
from ..models import InventoryItemCreate, InventoryItemUpdate
from ..services.location_resolver import LocationResolver
from .base import SideEffect, Tool, ToolResult, parse_args, render_json

# Optional attributes accepted by create, store and update
ITEM_FIELD_PROPERTIES: Dict[str, Dict[str, Any]] = {
    "position": {"type": "string", "description": "Optional specific position within the location"},
    "description": {"type": "string", "description": "Optional description of the item"},
    "quantity": {"type": "number", "description": "Quantity of items"},
    "unit_price": {"type": "number", "description": "Optional unit price of the item"},
    "unit": {
        "type": "string",
        "description": 'Optional unit of measurement (e.g., "pieces", "kg", "meters")',
    },
    "sku": {"type": "string", "description": "Optional stock keeping unit code"},
    "reorder_point": {"type": "number", "description": "Optional stock level that triggers a reorder"},
    "reorder_quantity": {"type": "number", "description": "Optional quantity to reorder"},
    "min_stock_level": {"type": "number", "description": "Optional minimum stock level"},
    "max_stock_level": {"type": "number", "description": "Optional maximum stock level"},
    "expiration_date": {"type": "string", "description": "Optional expiration date (YYYY-MM-DD)"},
}

ITEM_ID_PROPERTY = {"type": "number", "description": "ID of the inventory item"}


def _item_id(args: Dict[str, Any]) -> int:
    value = args["item_id"]
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(f"item_id must be an integer, got {value!r}", fields=["item_id"])


class GetInventoryItemsTool(Tool):
    name = "get_inventory_items"
    description = "Get inventory items, optionally filtered by search term"
    side_effect = SideEffect.READ
    properties = {
        "search": {"type": "string", "description": "Optional search term to filter items"},
    }

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        search = args.get("search") or None
        try:
            items = await self.client.list_inventory_items(search=search)
        except BackendError as e:
            raise e.with_context("Failed to get inventory items") from e

        matching = f' matching "{search}"' if search else ""
        return ToolResult.ok(
            f"Found {len(items)} inventory items{matching}:\n{render_json(items)}", data=items
        )


class CreateInventoryItemTool(Tool):
    name = "create_inventory_item"
    description = "Create a new inventory item in a specific stock location"
    side_effect = SideEffect.WRITE
    properties = {
        "name": {"type": "string", "description": "Name of the item"},
        "stock_location_id": {
            "type": "number",
            "description": "ID of the stock location where item will be stored",
        },
        **ITEM_FIELD_PROPERTIES,
    }
    required = ["name", "stock_location_id"]

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        payload = parse_args(InventoryItemCreate, args).to_payload()
        try:
            item = await self.client.create_inventory_item(payload)
        except BackendError as e:
            raise e.with_context("Failed to create inventory item") from e

        return ToolResult.ok(f"Successfully created inventory item: {render_json(item)}", data=item)


class StoreInventoryItemTool(Tool):
    """Resolve a location from free text, then create the item there"""

    name = "store_inventory_item"
    description = (
        "Store an item at a location described in plain language. The stock location "
        "is looked up by description and created automatically if it does not exist"
    )
    side_effect = SideEffect.WRITE
    properties = {
        "name": {"type": "string", "description": "Name of the item"},
        "location_description": {
            "type": "string",
            "description": 'Free-text location, e.g. "shelf A in the storage room"',
        },
        **ITEM_FIELD_PROPERTIES,
    }
    required = ["name", "location_description"]

    def __init__(self, client: InventoryApiClient, resolver: LocationResolver):
        self.client = client
        self.resolver = resolver

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        fields = {
            k: v for k, v in args.items() if k not in ("location_description", "stock_location_id")
        }
        # bad values must fail before a location can be created
        attributes = parse_args(InventoryItemUpdate, fields)

        location = await self.resolver.resolve(str(args["location_description"]))
        payload = {**attributes.to_payload(), "stock_location_id": location.id}
        try:
            item = await self.client.create_inventory_item(payload)
        except BackendError as e:
            raise e.with_context("Failed to create inventory item") from e

        return ToolResult.ok(
            f'Successfully stored inventory item in stock location "{location.name}" '
            f"(ID {location.id}): {render_json(item)}",
            data={"stock_location": location.model_dump(), "item": item},
        )


class UpdateInventoryItemTool(Tool):
    name = "update_inventory_item"
    description = "Update an existing inventory item; only the given fields are changed"
    side_effect = SideEffect.WRITE
    properties = {
        "item_id": ITEM_ID_PROPERTY,
        "name": {"type": "string", "description": "New name of the item"},
        "stock_location_id": {"type": "number", "description": "ID of the new stock location"},
        **ITEM_FIELD_PROPERTIES,
    }
    required = ["item_id"]

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        item_id = _item_id(args)
        changes = parse_args(InventoryItemUpdate, args).to_payload()
        try:
            item = await self.client.update_inventory_item(item_id, changes)
        except BackendError as e:
            raise e.with_context(f"Failed to update inventory item {item_id}") from e

        return ToolResult.ok(
            f"Successfully updated inventory item {item_id}: {render_json(item)}", data=item
        )


class DeleteInventoryItemTool(Tool):
    name = "delete_inventory_item"
    description = "Delete an inventory item"
    side_effect = SideEffect.WRITE
    properties = {"item_id": ITEM_ID_PROPERTY}
    required = ["item_id"]

    def __init__(self, client: InventoryApiClient):
        self.client = client

    async def run(self, args: Dict[str, Any]) -> ToolResult:
        item_id = _item_id(args)
        try:
            await self.client.delete_inventory_item(item_id)
        except BackendError as e:
            raise e.with_context(f"Failed to delete inventory item {item_id}") from e

        return ToolResult.ok(f"Successfully deleted inventory item {item_id}", data={"id": item_id})
