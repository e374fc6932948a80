# SPDX-License-Identifier: Apache-2.0
"""Find-or-create resolution of stock locations from free text.

The backend is queried on every call; nothing is cached. When the search
returns matches the first one wins, in the order the backend returned them.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..clients.inventory_api import InventoryApiClient
from ..exceptions import BackendError, ResolutionError
from ..models import StockLocation, StockLocationCreate

logger = logging.getLogger(__name__)

SHORT_NAME_MAX_LENGTH = 10
AUTO_CREATED_PREFIX = "Auto-created location: "

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def derive_short_name(description: str) -> str:
    """Short code for a location: ASCII letters and digits only, first 10, upper-cased."""
    return _NON_ALNUM.sub("", description)[:SHORT_NAME_MAX_LENGTH].upper()


def _to_location(body: Any) -> StockLocation:
    try:
        return StockLocation.model_validate(body)
    except PydanticValidationError as e:
        fields = sorted({str(err["loc"][0]) if err["loc"] else "body" for err in e.errors()})
        raise BackendError(
            f"Malformed stock location in response: missing or invalid {', '.join(fields)}"
        ) from e


class LocationResolver:
    def __init__(self, client: InventoryApiClient) -> None:
        self.client = client

    async def resolve(self, location_description: str) -> StockLocation:
        """Return the best existing match for the description, creating one if none exists.

        Raises:
            ResolutionError: When the search or the create call fails.
        """
        try:
            matches = await self.client.list_stock_locations(search=location_description)
            if matches:
                location = _to_location(matches[0])
                logger.info(
                    f"Matched stock location #{location.id} '{location.name}' "
                    f"for '{location_description}'"
                )
                return location

            payload = StockLocationCreate(
                name=location_description,
                short_name=derive_short_name(location_description),
                description=f"{AUTO_CREATED_PREFIX}{location_description}",
            )
            if not payload.short_name:
                logger.warning(
                    f"Description '{location_description}' has no letters or digits; "
                    "creating location with an empty short_name"
                )
            created = await self.client.create_stock_location(payload.model_dump())
            location = _to_location(created)
        except BackendError as e:
            raise ResolutionError(location_description, e) from e

        logger.info(f"Created stock location #{location.id} '{location.name}' ({location.short_name})")
        return location


__all__ = ["LocationResolver", "derive_short_name"]
