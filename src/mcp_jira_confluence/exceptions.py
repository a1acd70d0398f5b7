class MCPJiraConfluenceError(Exception):
    """Base exception for mcp-jira-confluence errors."""

    pass


class VendorApiError(MCPJiraConfluenceError):
    """Raised when Jira or Confluence answers with a non-2xx status."""

    def __init__(
        self, service_name: str, status_code: int, reason: str, body: str
    ) -> None:
        self.service_name = service_name
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{service_name} API Error: {status_code} {reason} - {body}")


class UnknownToolError(MCPJiraConfluenceError):
    """Raised when a tool call names a tool that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")
