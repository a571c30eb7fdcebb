"""Free-text filtering over a collection of ideas."""

from collections.abc import Iterable

from ideasync.idea._models import Idea

__all__ = ["search_ideas"]


def search_ideas(ideas: Iterable[Idea], query: str) -> list[Idea]:
    """Filter ideas whose transcription or title contains the query.

    Matching is case-insensitive. A blank query matches everything. Input
    order is preserved.

    Args:
        ideas: Ideas to filter.
        query: Substring to look for.

    Returns:
        The matching ideas.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(ideas)
    return [
        idea
        for idea in ideas
        if needle in idea.transcription.casefold()
        or (idea.title is not None and needle in idea.title.casefold())
    ]
