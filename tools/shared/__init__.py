"""Shared request models and base classes for Qwen MCP tools."""
