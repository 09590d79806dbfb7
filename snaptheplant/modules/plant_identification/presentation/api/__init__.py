# 📄 File: snaptheplant/modules/plant_identification/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plant photo identification.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

