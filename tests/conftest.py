# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import AsyncIterator

import pytest
import pytest_asyncio
import respx

from inventory_bridge.clients.inventory_api import InventoryApiClient
from inventory_bridge.server.config import Settings

API_URL = "http://inventory.test/api"
API_TOKEN = "test-token"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=API_URL, api_token=API_TOKEN, timeout=5.0)


@pytest.fixture
def api_mock() -> respx.MockRouter:
    """Mocks every httpx call; unmatched requests fail the call they were made in."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[InventoryApiClient]:
    async with InventoryApiClient(settings) as api_client:
        yield api_client
