"""Client-side idea stores.

This package provides IdeaStore for active ideas and ArchivedIdeaStore for
archived ones. Each keeps its own cached view and refreshes independently.
"""

from ideasync.store._archived import ArchivedIdeaStore
from ideasync.store._base import BaseIdeaStore, StoreState
from ideasync.store._ideas import IdeaStore

__all__ = ["ArchivedIdeaStore", "BaseIdeaStore", "IdeaStore", "StoreState"]
