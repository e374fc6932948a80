# SPDX-License-Identifier: Apache-2.0
"""
Inventory Tool Base Classes

This module defines the base classes for the inventory tools.
Every tool inherits from Tool, declares its JSON schema and implements run().
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


class SideEffect(str, Enum):
    """Side effect classifications"""
    READ = "read"
    WRITE = "write"


class ToolResult(BaseModel):
    """Outcome of a tool invocation, converted to text only at the protocol boundary"""
    success: bool = Field(..., description="Whether the tool execution was successful")
    text: Optional[str] = Field(None, description="Human-readable success message")
    data: Optional[Any] = Field(None, description="Entity or entities returned by the backend")
    error: Optional[str] = Field(None, description="Error message if failed")

    @classmethod
    def ok(cls, text: str, data: Any = None) -> "ToolResult":
        return cls(success=True, text=text, data=data)

    @classmethod
    def failure(cls, error: str) -> "ToolResult":
        return cls(success=False, error=error)

    def to_text(self) -> str:
        if self.success:
            return self.text or ""
        return f"Error: {self.error}"


def render_json(data: Any) -> str:
    """Pretty JSON rendering used in success messages."""
    if isinstance(data, BaseModel):
        data = data.model_dump()
    elif isinstance(data, list):
        data = [d.model_dump() if isinstance(d, BaseModel) else d for d in data]
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def parse_args(model: Type[M], args: Dict[str, Any]) -> M:
    """Coerce raw tool arguments into ``model``, reporting bad values as ValidationError."""
    try:
        return model.model_validate(args)
    except PydanticValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid arguments: {problems}", fields=fields) from e


class Tool(ABC):
    """Base class for all inventory tools"""

    name: str = ""
    description: str = ""
    side_effect: SideEffect = SideEffect.READ
    properties: Dict[str, Dict[str, Any]] = {}
    required: List[str] = []

    @abstractmethod
    async def run(self, args: Dict[str, Any]) -> ToolResult:
        """
        Execute the tool with already validated arguments

        Args:
            args: Tool arguments; every name in ``required`` is present

        Returns:
            ToolResult with the success message and the returned data
        """

    def get_schema(self) -> Dict[str, Any]:
        """
        Get the JSON schema for this tool's arguments

        Returns:
            JSON schema as dictionary
        """
        schema: Dict[str, Any] = {"type": "object", "properties": dict(self.properties)}
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def missing_arguments(self, args: Dict[str, Any]) -> List[str]:
        """Names of required arguments that are absent, null or empty strings."""
        return [name for name in self.required if args.get(name) is None or args.get(name) == ""]
