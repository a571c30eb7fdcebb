"""Remote idea service.

This package provides the IdeaService gateway for the entries API and the
wire models it parses responses into.
"""

from ideasync.gateway._models import (
    ApiResponse,
    ArchiveResult,
    ProcessedContent,
    RawEntry,
)
from ideasync.gateway._service import (
    DEFAULT_AUDIO_FILENAME,
    DEFAULT_PAGE_SIZE,
    IdeaService,
)

__all__ = [
    "DEFAULT_AUDIO_FILENAME",
    "DEFAULT_PAGE_SIZE",
    "ApiResponse",
    "ArchiveResult",
    "IdeaService",
    "ProcessedContent",
    "RawEntry",
]
