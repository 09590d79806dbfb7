# 📄 File: snaptheplant/modules/community_social/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for community plant posts.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

