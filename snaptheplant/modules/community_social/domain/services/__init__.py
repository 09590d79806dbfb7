# 📄 File: snaptheplant/modules/community_social/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The actions you can take around community plant posts.
# 🧪 Purpose (Technical Summary):
# Domain services operating through the storage unit of work.
# 🔗 Dependencies:
# domain models, snaptheplant.shared.infrastructure.storage
# 🔄 Connected Modules / Calls From:
# API routers, snaptheplant.shared.core.container

"""
Community domain services.
"""
