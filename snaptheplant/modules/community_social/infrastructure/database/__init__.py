# 📄 File: snaptheplant/modules/community_social/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps community plant posts in the relational database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and async repository implementations.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage.sql, migrations

"""
SQLAlchemy persistence.
"""
