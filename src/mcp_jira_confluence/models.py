"""
Argument models shared by the tool definitions.

Tool arguments arrive as camelCase JSON (``issueIdOrKey``, ``maxResults``);
the models expose them as snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ToolArguments(BaseModel):
    """Base model for the arguments of a single tool invocation.

    Required fields have no default. Optional fields default to ``None``
    so that a handler can tell an absent argument from a supplied one and
    apply its own documented default. Undeclared arguments are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )
