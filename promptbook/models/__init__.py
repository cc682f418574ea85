"""Promptbook data models."""

from .prompt import Prompt
from .promptbook import (
    ModelRequirements,
    PromptbookJson,
    PromptbookParameter,
    PromptTemplate,
    find_parameter_names,
)

__all__ = [
    "ModelRequirements",
    "Prompt",
    "PromptTemplate",
    "PromptbookJson",
    "PromptbookParameter",
    "find_parameter_names",
]
