"""
README Generator MCP server: tool table and FastMCP registration.
"""

from .operations import ToolResult, dispatch, list_operations

__all__ = ['ToolResult', 'dispatch', 'list_operations']
