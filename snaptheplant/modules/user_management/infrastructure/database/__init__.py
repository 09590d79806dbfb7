# 📄 File: snaptheplant/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps user accounts in the relational database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and async repository implementations.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage.sql, migrations

"""
SQLAlchemy persistence.
"""
