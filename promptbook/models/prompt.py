"""Prompt model carried between clients, servers, and executors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .promptbook import ModelRequirements


class Prompt(BaseModel):
    """A unit of work ready to be sent to a model.

    Attributes:
        title: Short label, usually the template title it was built from.
        content: Prompt text with parameters already substituted.
        model_requirements: Model variant and optional model name.
        promptbook_url: URL of the promptbook the prompt originates from.
        parameters: Parameter values used to build ``content``.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, protected_namespaces=()
    )

    title: str = ""
    content: str
    model_requirements: ModelRequirements = Field(
        default_factory=ModelRequirements, alias="modelRequirements"
    )
    promptbook_url: str | None = Field(default=None, alias="promptbookUrl")
    parameters: dict[str, str] = Field(default_factory=dict)
