# 📄 File: snaptheplant/modules/community_social/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how community posts are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``community_shares`` table.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - snaptheplant.shared.infrastructure.database.connection (Base, UTCDateTime)
#
# 🔄 Connected Modules / Calls From:
# - community_share_repository_impl.py (CRUD operations)
# - migrations (schema generation)

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from snaptheplant.shared.infrastructure.database.connection import Base, UTCDateTime
from snaptheplant.shared.utils.helpers import utc_now


class CommunityShareModel(Base):
    """SQLAlchemy model for a community post about a plant."""

    __tablename__ = "community_shares"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    date_posted = Column(UTCDateTime, nullable=False, default=utc_now, index=True)
    likes = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CommunityShareModel(id={self.id}, title='{self.title}', likes={self.likes})>"
