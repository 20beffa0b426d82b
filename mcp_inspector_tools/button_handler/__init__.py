"""Press buttons (call tools) on MCP servers through the inspector CLI."""
