# 📄 File: snaptheplant/modules/community_social/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts that store or fetch data for community plant posts.
# 🧪 Purpose (Technical Summary):
# Infrastructure adapters.
# 🔗 Dependencies:
# SQLAlchemy / external clients
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage, snaptheplant.shared.core.container

"""
Community infrastructure.
"""
