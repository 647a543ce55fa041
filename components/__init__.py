"""components — Immutable game records and small data holders.

Submodules
----------
entities       Category, Entity, WorldState
rendering      RectView, TextView
dev_log        DevLog

All public names are re-exported here so code can do
``from components import Entity``.
"""

from components.entities import (
    Category, Entity, WorldState, CAR_CATEGORIES, LOG_CATEGORIES,
)
from components.rendering import RectView, TextView
from components.dev_log import DevLog

__all__ = [
    # entities
    "Category", "Entity", "WorldState", "CAR_CATEGORIES", "LOG_CATEGORIES",
    # rendering
    "RectView", "TextView",
    # logging
    "DevLog",
]
