from .base import Tool, ToolRegistry, UnknownToolError

__all__ = ["Tool", "ToolRegistry", "UnknownToolError"]
