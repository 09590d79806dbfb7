# 📄 File: snaptheplant/modules/community_social/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 web endpoints for community plant posts.
# 🧪 Purpose (Technical Summary):
# FastAPI routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Community API v1 routes.
"""
