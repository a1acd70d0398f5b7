"""MCP server wiring for the Jira and Confluence adapters."""
