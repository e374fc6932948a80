# SPDX-License-Identifier: Apache-2.0
"""
Static tool catalog keyed by tool name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ..exceptions import UnknownToolError
from ..tools.base import SideEffect, Tool

_TOOL_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")


class ToolRegistrationError(Exception):
    pass


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=dict)
    read_only: bool = False


class ToolRegistry:
    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools: Dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not _TOOL_NAME_PATTERN.fullmatch(name):
            raise ToolRegistrationError(f"Invalid tool name: {name!r}")

    def register(self, tool: Tool) -> None:
        self._validate_name(tool.name)
        unknown = [r for r in tool.required if r not in tool.properties]
        if unknown:
            raise ToolRegistrationError(
                f"Tool '{tool.name}' requires undeclared arguments: {', '.join(unknown)}"
            )
        if tool.name in self._tools:
            raise ToolRegistrationError(f"Tool '{tool.name}' already registered.")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def names(self) -> List[str]:
        return list(self._tools.keys())

    def exists(self, name: str) -> bool:
        return name in self._tools

    def descriptors(self) -> List[ToolDescriptor]:
        return [
            ToolDescriptor(
                name=t.name,
                description=t.description,
                input_schema=t.get_schema(),
                read_only=t.side_effect is SideEffect.READ,
            )
            for t in self._tools.values()
        ]


__all__ = [
    "ToolDescriptor",
    "ToolRegistrationError",
    "ToolRegistry",
]
