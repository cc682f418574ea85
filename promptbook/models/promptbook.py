"""Promptbook definition models.

Pydantic models describing the JSON form of a promptbook (``.ptbk.json``).
Field aliases follow the camelCase wire format; Python code may use either
the alias or the snake_case field name. Definitions are frozen once built so
they can be shared between registries and threads without copying.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Placeholders inside template content, e.g. "Write about {topic}"
PARAMETER_PLACEHOLDER = re.compile(r"\{([A-Za-z_]\w*)\}")

ExecutionType = Literal["PROMPT_TEMPLATE", "SIMPLE_TEMPLATE", "SCRIPT"]


def find_parameter_names(content: str) -> list[str]:
    """Return placeholder names used in ``content`` in first-seen order."""
    seen: dict[str, None] = {}
    for match in PARAMETER_PLACEHOLDER.finditer(content):
        seen.setdefault(match.group(1), None)
    return list(seen)


class ModelRequirements(BaseModel):
    """Requirements a model must satisfy to run a prompt."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="allow", protected_namespaces=()
    )

    model_variant: Literal["CHAT", "COMPLETION"] = Field(
        default="CHAT", alias="modelVariant"
    )
    model_name: str | None = Field(default=None, alias="modelName")


class PromptbookParameter(BaseModel):
    """Parameter declared by a promptbook.

    Attributes:
        name: Parameter name as referenced by ``{name}`` placeholders.
        description: Optional human-readable description.
        is_input: Whether the caller supplies the parameter.
        is_output: Whether the parameter is returned to the caller.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str | None = None
    is_input: bool = Field(default=False, alias="isInput")
    is_output: bool = Field(default=False, alias="isOutput")


class PromptTemplate(BaseModel):
    """Single step of a promptbook producing one resulting parameter."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="allow", protected_namespaces=()
    )

    name: str = Field(min_length=1)
    title: str = ""
    description: str | None = None
    execution_type: ExecutionType = Field(
        default="PROMPT_TEMPLATE", alias="executionType"
    )
    model_requirements: ModelRequirements | None = Field(
        default=None, alias="modelRequirements"
    )
    content: str = ""
    result_parameter_name: str = Field(alias="resultingParameterName")
    dependent_parameter_names: list[str] = Field(
        default_factory=list, alias="dependentParameterNames"
    )

    @model_validator(mode="before")
    @classmethod
    def _derive_dependencies(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if "dependentParameterNames" in data or "dependent_parameter_names" in data:
            return data
        content = data.get("content")
        if isinstance(content, str):
            return {**data, "dependentParameterNames": find_parameter_names(content)}
        return data


class PromptbookJson(BaseModel):
    """Structured promptbook definition.

    Only ``promptbook_url`` is meaningful to the registry; the remaining
    fields are checked by the default validator. Unknown keys are kept as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    title: str = ""
    promptbook_url: str | None = Field(default=None, alias="promptbookUrl")
    promptbook_version: str | None = Field(default=None, alias="promptbookVersion")
    description: str | None = None
    parameters: list[PromptbookParameter] = Field(default_factory=list)
    prompt_templates: list[PromptTemplate] = Field(
        default_factory=list, alias="promptTemplates"
    )

    def to_json(self) -> str:
        """Serialize to the camelCase ``.ptbk.json`` form."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
