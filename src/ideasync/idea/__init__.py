"""Idea domain model, normalization and validation.

This package provides the canonical Idea record, the mapper that builds it
from raw backend entries, and the validators that guard user input.
"""

from ideasync.idea._models import (
    UNCATEGORIZED,
    UPDATABLE_FIELDS,
    Idea,
    IdeaInput,
    IdeaUpdate,
)
from ideasync.idea._mapper import normalize, normalize_list
from ideasync.idea._search import search_ideas
from ideasync.idea._validator import validate_create_input, validate_update

__all__ = [
    "UNCATEGORIZED",
    "UPDATABLE_FIELDS",
    "Idea",
    "IdeaInput",
    "IdeaUpdate",
    "normalize",
    "normalize_list",
    "search_ideas",
    "validate_create_input",
    "validate_update",
]
