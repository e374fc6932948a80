# SPDX-License-Identifier: Apache-2.0
"""File: src/inventory_bridge/runtime/dispatcher.py

Project: inventory-bridge

Description:
    Routes a named invocation to its tool and packages the outcome.
    The dispatcher is the only place where errors become text: every
    failure, whether a missing argument, an unknown tool, a backend error
    or an unexpected exception, comes back as a failed ToolResult rendered
    as "Error: <message>". Nothing is raised to the protocol layer.

"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import InventoryBridgeError, ValidationError
from .registry import ToolDescriptor, ToolRegistry
from ..tools.base import ToolResult

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Stateless per invocation; concurrent calls share nothing but the registry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    def list_tools(self) -> List[ToolDescriptor]:
        return self.registry.descriptors()

    async def invoke(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        args = dict(arguments or {})
        try:
            tool = self.registry.get(tool_name)

            missing = tool.missing_arguments(args)
            if missing:
                raise ValidationError.missing(missing)

            logger.info(f"Invoking tool {tool_name}")
            return await tool.run(args)

        except InventoryBridgeError as e:
            logger.warning(f"Tool {tool_name} failed: {e.error_code}: {e.message}")
            return ToolResult.failure(e.message)
        except Exception as e:
            logger.exception(f"Unexpected error in tool {tool_name}")
            return ToolResult.failure(str(e) or e.__class__.__name__)


__all__ = ["ToolDispatcher"]
