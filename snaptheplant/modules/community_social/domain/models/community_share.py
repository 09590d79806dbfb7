# 📄 File: snaptheplant/modules/community_social/domain/models/community_share.py
# 🧭 Purpose (Layman Explanation):
# A post where a user shows off one of their plants to the community, with a like counter.
# 🧪 Purpose (Technical Summary):
# CommunityShare domain model; ``likes`` only ever increases.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# community_service.py, community_share_repository.py, community endpoints

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from snaptheplant.shared.utils.helpers import ensure_utc, utc_now


class CommunityShare(BaseModel):
    """Public post about a plant."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    plant_id: int
    title: str
    content: Optional[str] = None
    image_url: Optional[str] = None
    date_posted: datetime = Field(default_factory=utc_now)
    likes: int = Field(0, ge=0)

    @field_validator("date_posted")
    @classmethod
    def normalize_date_posted(cls, v: datetime) -> datetime:
        return ensure_utc(v)
