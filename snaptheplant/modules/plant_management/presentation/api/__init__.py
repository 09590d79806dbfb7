# 📄 File: snaptheplant/modules/plant_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

