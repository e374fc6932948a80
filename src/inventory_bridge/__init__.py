# SPDX-License-Identifier: Apache-2.0
"""Inventory bridge: MCP tools over a Laravel inventory API."""

__version__ = "1.0.0"
