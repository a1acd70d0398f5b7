"""Jira tool definitions: argument models, input schemas and handlers."""

import logging
from typing import Any, Literal

from ..models import ToolArguments
from ..servers.registry import ToolSpec
from ..utils.date import jira_timestamp_now
from ..utils.params import compact_params, join_list
from .client import JiraClient

logger = logging.getLogger("mcp-jira-confluence.jira")

SEARCH_PATH = "rest/api/2/search"
ISSUE_PATH = "rest/api/2/issue/{issue_id_or_key}"
WORKLOG_PATH = "rest/api/2/issue/{issue_id_or_key}/worklog"

DEFAULT_START_AT = 0
DEFAULT_MAX_RESULTS = 50
ALL_FIELDS = ["*all"]
DEFAULT_ADJUST_ESTIMATE = "auto"

AdjustEstimate = Literal["new", "leave", "manual", "auto"]


class JqlSearchArgs(ToolArguments):
    jql: str
    next_page_token: str | int | None = None
    max_results: int | None = None
    fields: list[str] | None = None
    expand: str | None = None


class GetIssueArgs(ToolArguments):
    issue_id_or_key: str
    fields: list[str] | None = None
    expand: str | None = None
    properties: list[str] | None = None
    fail_fast: bool | None = None


class LogWorkArgs(ToolArguments):
    issue_id_or_key: str
    time_spent: str | None = None
    time_spent_seconds: int | None = None
    started: str | None = None
    comment: str | None = None
    adjust_estimate: AdjustEstimate | None = None
    new_estimate: str | None = None
    reduce_by: str | None = None


def _start_at(next_page_token: str | int | None) -> str | int:
    """Translate the page token into the v2 search ``startAt`` offset.

    Numeric tokens are sent as integers; anything else is forwarded as is.
    """
    if not next_page_token:
        return DEFAULT_START_AT
    if isinstance(next_page_token, str) and next_page_token.isdigit():
        return int(next_page_token)
    return next_page_token


def jql_search(jira: JiraClient, args: JqlSearchArgs) -> Any:
    """Search issues with JQL.

    Args:
        jira: Jira client
        args: Search arguments

    Returns:
        The decoded search response
    """
    body: dict[str, Any] = {
        "jql": args.jql,
        "startAt": _start_at(args.next_page_token),
        "maxResults": args.max_results or DEFAULT_MAX_RESULTS,
        # An empty field list means "no preference", same as omitting it
        "fields": args.fields or ALL_FIELDS,
    }
    if args.expand is not None:
        body["expand"] = args.expand

    logger.debug(f"Searching Jira with JQL: {args.jql}")
    return jira.post(SEARCH_PATH, data=body)


def get_issue(jira: JiraClient, args: GetIssueArgs) -> Any:
    """Fetch one issue by id or key.

    Only the optional arguments that were supplied become query parameters.
    """
    params = compact_params(
        {
            "fields": join_list(args.fields),
            "expand": args.expand or None,
            "properties": join_list(args.properties),
            "failFast": args.fail_fast,
        }
    )
    path = ISSUE_PATH.format(issue_id_or_key=args.issue_id_or_key)
    return jira.get(path, params=params)


def build_worklog(args: LogWorkArgs) -> dict[str, Any]:
    """Build the worklog JSON body.

    ``timeSpent`` takes precedence over ``timeSpentSeconds`` when both are
    given.
    """
    worklog: dict[str, Any] = {
        "comment": args.comment or "",
        "started": args.started or jira_timestamp_now(),
    }
    if args.time_spent:
        worklog["timeSpent"] = args.time_spent
    elif args.time_spent_seconds:
        worklog["timeSpentSeconds"] = args.time_spent_seconds
    return worklog


def build_worklog_params(args: LogWorkArgs) -> dict[str, str]:
    """Build the estimate-adjustment query parameters for a worklog."""
    adjust_estimate = args.adjust_estimate or DEFAULT_ADJUST_ESTIMATE
    params = {"adjustEstimate": adjust_estimate}

    # newEstimate and reduceBy are only meaningful for their own mode
    if adjust_estimate == "new" and args.new_estimate:
        params["newEstimate"] = args.new_estimate
    elif adjust_estimate == "manual" and args.reduce_by:
        params["reduceBy"] = args.reduce_by
    return params


def log_work(jira: JiraClient, args: LogWorkArgs) -> Any:
    """Add a worklog entry to an issue."""
    path = WORKLOG_PATH.format(issue_id_or_key=args.issue_id_or_key)
    return jira.post(
        path, data=build_worklog(args), params=build_worklog_params(args)
    )


JIRA_TOOLS = [
    ToolSpec(
        name="jql_search",
        title="JQL Search",
        description="Perform enhanced JQL search in Jira",
        input_schema={
            "type": "object",
            "properties": {
                "jql": {"type": "string", "description": "JQL query string"},
                "nextPageToken": {
                    "type": "string",
                    "description": "Token for next page",
                    "default": "0",
                },
                "maxResults": {
                    "type": "integer",
                    "description": "Maximum results to fetch",
                    "default": DEFAULT_MAX_RESULTS,
                },
                "fields": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "List of fields to return for each issue",
                    "default": ALL_FIELDS,
                },
                "expand": {
                    "type": "string",
                    "description": "Additional info to include in the response",
                },
            },
            "required": ["jql"],
        },
        arguments=JqlSearchArgs,
        handler=jql_search,
    ),
    ToolSpec(
        name="get_issue",
        title="Get Issue",
        description="Retrieve details about an issue by its ID or key.",
        input_schema={
            "type": "object",
            "properties": {
                "issueIdOrKey": {
                    "type": "string",
                    "description": "ID or key of the issue",
                },
                "fields": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Fields to include in the response",
                },
                "expand": {
                    "type": "string",
                    "description": "Additional information to include in the response",
                },
                "properties": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Properties to include in the response",
                },
                "failFast": {
                    "type": "boolean",
                    "description": "Fail quickly on errors",
                    "default": False,
                },
            },
            "required": ["issueIdOrKey"],
        },
        arguments=GetIssueArgs,
        handler=get_issue,
    ),
    ToolSpec(
        name="log_work",
        title="Log Work",
        description="Log time worked on an issue by adding a worklog entry.",
        input_schema={
            "type": "object",
            "properties": {
                "issueIdOrKey": {
                    "type": "string",
                    "description": "ID or key of the issue to log work against",
                },
                "timeSpent": {
                    "type": "string",
                    "description": "Time spent in human readable format (e.g., '1h 30m', '2d', '45m')",
                },
                "timeSpentSeconds": {
                    "type": "integer",
                    "description": "Time spent in seconds (alternative to timeSpent)",
                },
                "started": {
                    "type": "string",
                    "description": (
                        "When the work was started in ISO 8601 format "
                        "(e.g., '2023-06-15T10:00:00.000+0000'). "
                        "Defaults to current time if not provided."
                    ),
                },
                "comment": {
                    "type": "string",
                    "description": "Description of the work performed",
                    "default": "",
                },
                "adjustEstimate": {
                    "type": "string",
                    "enum": ["new", "leave", "manual", "auto"],
                    "description": (
                        "How to adjust the remaining estimate: 'new' (set new estimate), "
                        "'leave' (leave unchanged), 'manual' (reduce by specified amount), "
                        "'auto' (reduce by time logged)"
                    ),
                    "default": DEFAULT_ADJUST_ESTIMATE,
                },
                "newEstimate": {
                    "type": "string",
                    "description": "New estimate value when adjustEstimate is 'new'",
                },
                "reduceBy": {
                    "type": "string",
                    "description": "Amount to reduce estimate by when adjustEstimate is 'manual'",
                },
            },
            "required": ["issueIdOrKey"],
        },
        arguments=LogWorkArgs,
        handler=log_work,
        write=True,
        annotations={"destructiveHint": False},
    ),
]
