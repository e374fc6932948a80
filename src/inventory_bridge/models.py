# SPDX-License-Identifier: Apache-2.0
"""Pydantic models for the inventory API resources.

Entity models accept whatever extra fields the backend returns (timestamps,
relations) so they can be rendered back to the agent unchanged. Payload
models describe what this server is allowed to send.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class StockLocation(BaseModel):
    """A stock location as returned by the backend."""
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    short_name: Optional[str] = None
    description: Optional[str] = None


class StockLocationCreate(BaseModel):
    name: str
    short_name: str
    description: Optional[str] = None


class InventoryItemFields(BaseModel):
    """Optional item attributes shared by create and update."""
    model_config = ConfigDict(extra="ignore")

    position: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[Number] = None
    unit_price: Optional[Number] = None
    unit: Optional[str] = None
    sku: Optional[str] = None
    reorder_point: Optional[Number] = None
    reorder_quantity: Optional[Number] = None
    min_stock_level: Optional[Number] = None
    max_stock_level: Optional[Number] = None
    expiration_date: Optional[str] = Field(None, description="ISO date, e.g. 2025-12-31")

    def to_payload(self) -> Dict[str, Any]:
        """Returns only the fields that were given a value."""
        return self.model_dump(exclude_none=True)


class InventoryItemCreate(InventoryItemFields):
    name: str
    stock_location_id: int


class InventoryItemUpdate(InventoryItemFields):
    name: Optional[str] = None
    stock_location_id: Optional[int] = None


__all__ = [
    "InventoryItemCreate",
    "InventoryItemFields",
    "InventoryItemUpdate",
    "StockLocation",
    "StockLocationCreate",
]
