"""
Registry of every ORM model.

Importing this module attaches all tables to ``Base.metadata``; used by
``DatabaseConnectionManager.create_all`` and the Alembic environment.
"""

from snaptheplant.modules.community_social.infrastructure.database.models import CommunityShareModel
from snaptheplant.modules.plant_management.infrastructure.database.models import (
    CareActionModel,
    PlantModel,
)
from snaptheplant.modules.user_management.infrastructure.database.models import UserModel
from snaptheplant.shared.infrastructure.database.connection import Base

__all__ = [
    "Base",
    "UserModel",
    "PlantModel",
    "CareActionModel",
    "CommunityShareModel",
]
