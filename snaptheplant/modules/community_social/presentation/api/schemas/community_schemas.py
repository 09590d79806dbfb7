# 📄 File: snaptheplant/modules/community_social/presentation/api/schemas/community_schemas.py
# 🧭 Purpose (Layman Explanation):
# What a community post looks like when you share a plant, and what comes back.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for community shares.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# snaptheplant.modules.community_social.presentation.api.v1.community

from datetime import datetime
from typing import Optional

from pydantic import Field

from snaptheplant.shared.core.schemas import APIModel


class ShareCreateRequest(APIModel):
    plant_id: int
    title: str = Field(..., min_length=1, max_length=200)
    content: Optional[str] = Field(None, max_length=5000)
    image_url: Optional[str] = None


class ShareResponse(APIModel):
    id: int
    user_id: int
    plant_id: int
    title: str
    content: Optional[str] = None
    image_url: Optional[str] = None
    date_posted: datetime
    likes: int
