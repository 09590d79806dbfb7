# 📄 File: snaptheplant/modules/community_social/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the web app sends and receives for community plant posts.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# presentation/api/v1 routers

"""
Community API schemas.
"""
