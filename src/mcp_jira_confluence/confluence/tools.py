"""Confluence tool definitions: argument models, input schemas and handlers."""

from typing import Any

from ..models import ToolArguments
from ..servers.registry import ToolSpec
from ..utils.params import compact_params
from .client import ConfluenceClient

SEARCH_PATH = "content/search"
CONTENT_PATH = "content"
PAGE_PATH = "content/{page_id}"

DEFAULT_SEARCH_LIMIT = 25
DEFAULT_SEARCH_EXPAND = "body.storage"
DEFAULT_PAGE_EXPAND = "body.storage,version,space"


class SearchArgs(ToolArguments):
    cql: str
    limit: int | None = None
    expand: str | None = None


class GetPageArgs(ToolArguments):
    id: str
    expand: str | None = None


class CreatePageArgs(ToolArguments):
    space_key: str
    title: str
    html: str
    parent_id: str | None = None


def search(confluence: ConfluenceClient, args: SearchArgs) -> Any:
    """Search content with CQL and return the ``results`` list."""
    params = compact_params(
        {
            "cql": args.cql,
            "limit": DEFAULT_SEARCH_LIMIT if args.limit is None else args.limit,
            "expand": DEFAULT_SEARCH_EXPAND if args.expand is None else args.expand,
        }
    )
    response = confluence.get(SEARCH_PATH, params=params)
    return response.get("results", [])


def get_page(confluence: ConfluenceClient, args: GetPageArgs) -> Any:
    """Fetch a page by id."""
    expand = DEFAULT_PAGE_EXPAND if args.expand is None else args.expand
    return confluence.get(
        PAGE_PATH.format(page_id=args.id), params=compact_params({"expand": expand})
    )


def build_page(args: CreatePageArgs) -> dict[str, Any]:
    """Build the content payload for a new page in storage format.

    ``ancestors`` is only present when a parent page was given.
    """
    payload: dict[str, Any] = {
        "type": "page",
        "title": args.title,
        "space": {"key": args.space_key},
        "body": {"storage": {"value": args.html, "representation": "storage"}},
    }
    if args.parent_id:
        payload["ancestors"] = [{"id": args.parent_id}]
    return payload


def create_page(confluence: ConfluenceClient, args: CreatePageArgs) -> Any:
    """Create a page and return the created content."""
    return confluence.post(CONTENT_PATH, data=build_page(args))


CONFLUENCE_TOOLS = [
    ToolSpec(
        name="confluence.search",
        title="Search Pages",
        description="Search pages via CQL",
        input_schema={
            "type": "object",
            "properties": {
                "cql": {
                    "type": "string",
                    "description": "Confluence Query Language search string",
                },
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of results to return (default: 25)",
                    "default": DEFAULT_SEARCH_LIMIT,
                },
                "expand": {
                    "type": "string",
                    "description": "Fields to expand in the response (default: body.storage)",
                    "default": DEFAULT_SEARCH_EXPAND,
                },
            },
            "required": ["cql"],
        },
        arguments=SearchArgs,
        handler=search,
    ),
    ToolSpec(
        name="confluence.getPage",
        title="Get Page",
        description="Get a page by ID",
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Page ID"},
                "expand": {
                    "type": "string",
                    "description": "Fields to expand in the response (default: body.storage,version,space)",
                    "default": DEFAULT_PAGE_EXPAND,
                },
            },
            "required": ["id"],
        },
        arguments=GetPageArgs,
        handler=get_page,
    ),
    ToolSpec(
        name="confluence.createPage",
        title="Create Page",
        description="Create a new page",
        input_schema={
            "type": "object",
            "properties": {
                "spaceKey": {
                    "type": "string",
                    "description": "Space key where the page should be created",
                },
                "title": {"type": "string", "description": "Page title"},
                "html": {
                    "type": "string",
                    "description": "Page content in HTML storage format",
                },
                "parentId": {
                    "type": "string",
                    "description": "Parent page ID (optional)",
                },
            },
            "required": ["spaceKey", "title", "html"],
        },
        arguments=CreatePageArgs,
        handler=create_page,
        write=True,
        annotations={"destructiveHint": False},
    ),
]
