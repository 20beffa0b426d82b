"""List tools, resources and prompts of MCP servers through the inspector CLI."""
