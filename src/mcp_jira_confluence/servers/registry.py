"""Tool registry and dispatcher shared by both adapters."""

import functools
import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import anyio.to_thread
from mcp.types import CallToolResult, TextContent, Tool, ToolAnnotations

from ..client import VendorClient
from ..exceptions import UnknownToolError
from ..logging_config import log_operation
from ..models import ToolArguments
from ..utils.env import is_read_only_mode

logger = logging.getLogger("mcp-jira-confluence.servers")

ToolHandler = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class ToolSpec:
    """A tool descriptor bound to its argument model and handler."""

    name: str
    description: str
    input_schema: dict[str, Any]
    arguments: type[ToolArguments]
    handler: ToolHandler
    title: str | None = None
    write: bool = False  # Mutates vendor data; hidden in read-only mode
    annotations: dict[str, Any] = field(default_factory=dict)

    def to_tool(self) -> Tool:
        """Build the MCP descriptor advertised on ``tools/list``."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
            annotations=ToolAnnotations(
                title=self.title,
                readOnlyHint=not self.write,
                **self.annotations,
            ),
        )


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap a single text block into a tool result."""
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def error_result(error: Exception) -> CallToolResult:
    """Convert a failure raised while handling a tool into an ``isError`` result."""
    return text_result(f"Error: {error}", is_error=True)


class ToolRegistry:
    """Static table of tools for one adapter process.

    The registry is built once at startup. Listing tools never touches the
    network or the credential; dispatching runs exactly one handler and
    turns every failure it raises into an ``isError`` result. Routing
    failures (unknown tool names) are raised instead, since they are
    protocol faults rather than tool faults.
    """

    def __init__(self, service_name: str, specs: Iterable[ToolSpec] = ()) -> None:
        self.service_name = service_name
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: ToolSpec) -> None:
        """Add a tool to the registry.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if spec.name in self._specs:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._specs[spec.name] = spec

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, name: str) -> ToolSpec:
        """Look up the tool registered under ``name``.

        Raises:
            UnknownToolError: If no tool is registered under that name
        """
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_tools(self, read_only: bool = False) -> list[Tool]:
        """List tool descriptors, leaving out write tools in read-only mode."""
        return [
            spec.to_tool()
            for spec in self._specs.values()
            if not (read_only and spec.write)
        ]

    async def dispatch(
        self,
        name: str,
        arguments: dict[str, Any] | None,
        client: VendorClient,
    ) -> CallToolResult:
        """Run the tool registered under ``name`` with ``arguments``.

        Args:
            name: Tool name from the ``tools/call`` request
            arguments: Raw arguments from the request
            client: Vendor client handed to the handler

        Returns:
            The handler's return value pretty-printed as JSON, or an
            ``isError`` result carrying the failure message.

        Raises:
            UnknownToolError: If no tool is registered under ``name``
        """
        spec = self.get(name)

        with log_operation(logger, "call_tool", tool=name):
            try:
                if spec.write and is_read_only_mode():
                    logger.warning(f"Attempted to call tool '{name}' in read-only mode.")
                    raise ValueError(f"Cannot {name} in read-only mode.")

                args = spec.arguments.model_validate(arguments or {})
                result = await anyio.to_thread.run_sync(
                    functools.partial(spec.handler, client, args)
                )
            except Exception as e:  # noqa: BLE001 - every tool failure becomes an isError result
                logger.error(f"Tool execution error: {name}: {e}")
                logger.debug(f"Full exception details for {name}:", exc_info=True)
                return error_result(e)

        return text_result(json.dumps(result, indent=2, ensure_ascii=False))
