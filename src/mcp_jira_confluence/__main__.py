"""Entry point for ``python -m mcp_jira_confluence``."""

from mcp_jira_confluence import main

if __name__ == "__main__":
    main()
