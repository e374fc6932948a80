# SPDX-License-Identifier: Apache-2.0
"""Tests for ToolDispatcher and the inventory tools behind it.

Scope:
- Catalog listing and schemas.
- Unknown tools and missing required arguments (no HTTP traffic).
- Success messages and "Error: ..." rendering of backend failures.
- Payload shaping: absent fields are never sent.
"""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from inventory_bridge.clients.inventory_api import InventoryApiClient
from inventory_bridge.runtime.dispatcher import ToolDispatcher
from inventory_bridge.runtime.registry import ToolRegistry
from inventory_bridge.tools import build_tools

from .conftest import API_URL

pytestmark = pytest.mark.asyncio

LOCATION = {"id": 3, "name": "Garage", "short_name": "GARAGE", "description": None}
ITEM = {"id": 21, "name": "Drill", "stock_location_id": 3, "quantity": 2}


@pytest.fixture
def dispatcher(client: InventoryApiClient) -> ToolDispatcher:
    return ToolDispatcher(ToolRegistry(build_tools(client)))


# === Catalog ===

async def test_list_tools_returns_static_catalog(dispatcher: ToolDispatcher) -> None:
    tools = {t.name: t for t in dispatcher.list_tools()}

    assert list(tools) == [
        "get_stock_locations",
        "create_stock_location",
        "find_or_create_stock_location",
        "get_inventory_items",
        "create_inventory_item",
        "store_inventory_item",
        "update_inventory_item",
        "delete_inventory_item",
    ]
    assert tools["create_inventory_item"].input_schema["required"] == ["name", "stock_location_id"]
    assert tools["create_inventory_item"].input_schema["properties"]["stock_location_id"]["type"] == "number"
    assert "required" not in tools["get_stock_locations"].input_schema
    assert "sku" in tools["update_inventory_item"].input_schema["properties"]
    assert [name for name, t in tools.items() if t.read_only] == ["get_stock_locations", "get_inventory_items"]


# === Dispatch errors ===

async def test_unknown_tool(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    result = await dispatcher.invoke("launch_rocket", {})

    assert result.success is False
    assert result.to_text() == "Error: Unknown tool: launch_rocket"
    assert not api_mock.calls


async def test_missing_required_argument_makes_no_http_call(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    api_mock.post(f"{API_URL}/inventory-items").respond(201, json=ITEM)

    result = await dispatcher.invoke("create_inventory_item", {"name": "Drill"})
    text = result.to_text()

    assert text.startswith("Error:")
    assert "stock_location_id" in text
    assert not api_mock.calls


@pytest.mark.parametrize("arguments", [None, {}, {"name": "", "short_name": None}])
async def test_empty_values_count_as_missing(dispatcher: ToolDispatcher, arguments: dict) -> None:
    result = await dispatcher.invoke("create_stock_location", arguments)

    assert result.to_text() == "Error: Missing required arguments: name, short_name"


async def test_invalid_argument_type_is_reported(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    result = await dispatcher.invoke("create_inventory_item", {"name": "Drill", "stock_location_id": "garage"})

    assert result.to_text().startswith("Error: Invalid arguments: stock_location_id")
    assert not api_mock.calls


async def test_backend_error_is_returned_as_text(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    api_mock.post(f"{API_URL}/stock-locations").respond(
        422, json={"message": "The name has already been taken."}
    )

    result = await dispatcher.invoke("create_stock_location", {"name": "Garage", "short_name": "GARAGE"})

    assert result.to_text() == "Error: Failed to create stock location: The name has already been taken."


async def test_unexpected_exception_is_returned_as_text(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    api_mock.get(f"{API_URL}/inventory-items").mock(side_effect=RuntimeError("boom"))

    result = await dispatcher.invoke("get_inventory_items", {})

    assert result.to_text() == "Error: boom"


# === Stock locations ===

async def test_get_stock_locations_reports_count(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    route = api_mock.get(f"{API_URL}/stock-locations").respond(200, json={"data": [LOCATION]})

    result = await dispatcher.invoke("get_stock_locations", {"search": "gar"})

    assert result.success is True
    assert result.to_text().startswith('Found 1 stock locations matching "gar":\n')
    assert json.loads(result.to_text().split("\n", 1)[1]) == [LOCATION]
    assert route.calls.last.request.url.params["search"] == "gar"


async def test_create_stock_location_omits_absent_description(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    route = api_mock.post(f"{API_URL}/stock-locations").respond(201, json=LOCATION)

    result = await dispatcher.invoke("create_stock_location", {"name": "Garage", "short_name": "GARAGE"})

    assert result.to_text().startswith("Successfully created stock location: ")
    assert json.loads(route.calls.last.request.content) == {"name": "Garage", "short_name": "GARAGE"}


async def test_find_or_create_stock_location(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    api_mock.get(f"{API_URL}/stock-locations").respond(200, json=[])
    create = api_mock.post(f"{API_URL}/stock-locations").respond(
        201, json={"id": 8, "name": "blue box", "short_name": "BLUEBOX"}
    )

    result = await dispatcher.invoke("find_or_create_stock_location", {"location_description": "blue box"})

    assert result.to_text().startswith('Resolved stock location "blue box": ')
    assert json.loads(create.calls.last.request.content)["short_name"] == "BLUEBOX"


# === Inventory items ===

async def test_get_inventory_items_without_search(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    api_mock.get(f"{API_URL}/inventory-items").respond(200, json=[ITEM, ITEM])

    result = await dispatcher.invoke("get_inventory_items", {})

    assert result.to_text().startswith("Found 2 inventory items:\n")


async def test_create_inventory_item_sends_only_given_fields(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    route = api_mock.post(f"{API_URL}/inventory-items").respond(201, json=ITEM)

    result = await dispatcher.invoke(
        "create_inventory_item",
        {"name": "Drill", "stock_location_id": 3, "quantity": 2, "unit": None, "sku": "DR-1"},
    )

    assert result.to_text().startswith("Successfully created inventory item: ")
    assert json.loads(route.calls.last.request.content) == {
        "name": "Drill",
        "stock_location_id": 3,
        "quantity": 2,
        "sku": "DR-1",
    }


async def test_store_inventory_item_resolves_then_creates(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    api_mock.get(f"{API_URL}/stock-locations").respond(200, json=[LOCATION])
    create_location = api_mock.post(f"{API_URL}/stock-locations")
    create_item = api_mock.post(f"{API_URL}/inventory-items").respond(201, json=ITEM)

    result = await dispatcher.invoke(
        "store_inventory_item",
        {"name": "Drill", "location_description": "garage", "quantity": 2},
    )

    assert result.success is True
    assert result.to_text().startswith('Successfully stored inventory item in stock location "Garage" (ID 3): ')
    assert create_location.call_count == 0
    assert json.loads(create_item.calls.last.request.content) == {
        "name": "Drill",
        "quantity": 2,
        "stock_location_id": 3,
    }


async def test_store_inventory_item_creates_missing_location(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    api_mock.get(f"{API_URL}/stock-locations").respond(200, json={"data": []})
    api_mock.post(f"{API_URL}/stock-locations").respond(
        201, json={"data": {"id": 14, "name": "attic box 2", "short_name": "ATTICBOX2"}}
    )
    create_item = api_mock.post(f"{API_URL}/inventory-items").respond(201, json={**ITEM, "stock_location_id": 14})

    result = await dispatcher.invoke("store_inventory_item", {"name": "Drill", "location_description": "attic box 2"})

    assert "(ID 14)" in result.to_text()
    assert json.loads(create_item.calls.last.request.content)["stock_location_id"] == 14


async def test_store_inventory_item_resolution_failure(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    api_mock.get(f"{API_URL}/stock-locations").mock(side_effect=httpx.ConnectTimeout("timed out"))
    create_item = api_mock.post(f"{API_URL}/inventory-items")

    result = await dispatcher.invoke("store_inventory_item", {"name": "Drill", "location_description": "attic"})

    assert result.to_text() == "Error: Failed to resolve stock location 'attic': timed out"
    assert create_item.call_count == 0


async def test_update_inventory_item_strips_absent_fields(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    route = api_mock.put(f"{API_URL}/inventory-items/5").respond(200, json={"id": 5, "quantity": 10})

    result = await dispatcher.invoke("update_inventory_item", {"item_id": 5, "quantity": 10, "description": None})

    assert route.call_count == 1
    assert json.loads(route.calls.last.request.content) == {"quantity": 10}
    assert result.to_text().startswith("Successfully updated inventory item 5: ")


async def test_update_inventory_item_rejects_non_integer_id(
    dispatcher: ToolDispatcher, api_mock: respx.MockRouter
) -> None:
    result = await dispatcher.invoke("update_inventory_item", {"item_id": "five", "quantity": 1})

    assert result.to_text() == "Error: item_id must be an integer, got 'five'"
    assert not api_mock.calls


async def test_delete_inventory_item(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    route = api_mock.delete(f"{API_URL}/inventory-items/5").respond(204)

    result = await dispatcher.invoke("delete_inventory_item", {"item_id": "5"})

    assert route.called
    assert result.to_text() == "Successfully deleted inventory item 5"


async def test_delete_inventory_item_not_found(dispatcher: ToolDispatcher, api_mock: respx.MockRouter) -> None:
    api_mock.delete(f"{API_URL}/inventory-items/404").respond(404, json={"message": "Not found."})

    result = await dispatcher.invoke("delete_inventory_item", {"item_id": 404})

    assert result.to_text() == "Error: Failed to delete inventory item 404: Not found."
